import re

from setuptools import find_packages, setup


with open("ansiterm/__init__.py", "rb") as fh:
    init_text = fh.read().decode()
    VERSION = re.search(r"__version__ = \"(.*?)\"", init_text).group(1)

setup(
    name="ansiterm",
    version=VERSION,
    packages=find_packages(
        exclude=["tests", "tests.*", "examples", "examples.*"]
    ),
    python_requires=">=3.8.0",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    license="MIT",
    description="Terminal capabilities, ANSI styling and single-keystroke prompts for command line tools.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    zip_safe=True,
    entry_points={
        "console_scripts": [
            "ansiterm = ansiterm:cli",
        ],
    },
)
