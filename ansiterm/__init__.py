"""
ansiterm - terminal capabilities and single-keystroke prompts.
"""

from ._cli import cli  # noqa

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))
