import sys
import asyncio
import argparse

from .utils import disable_log_forwarding, enable_log_forwarding, listen_to_logs


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ansiterm",
        description="Inspect the terminal, or ask the user for a single keystroke.",
    )
    parser.add_argument("--version", action="store_true", help="show the version and exit")
    parser.add_argument(
        "--listen", action="store_true", help="print the logs forwarded by another ansiterm process"
    )
    parser.add_argument("--log", action="store_true", help="forward logs to 'ansiterm --listen'")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("caps", help="show what the terminal supports")

    ask = sub.add_parser("ask", help="prompt for one of the given characters")
    ask.add_argument("chars", nargs="+", help="the accepted characters")
    ask.add_argument("--message", "-m", default=None, help="the prompt text")
    ask.add_argument(
        "--default", "-d", type=int, default=None, help="index of the choice selected by Enter"
    )
    ask.add_argument(
        "--hide-choices", action="store_true", help="don't show the accepted characters"
    )
    return parser


def cli(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        print("ansiterm", __version__)
        return 0
    if args.listen:
        listen_to_logs()
        return 0
    handler = enable_log_forwarding() if args.log else None
    try:
        return run_command(parser, args)
    finally:
        if handler is not None:
            disable_log_forwarding(handler)


def run_command(parser, args):
    from .term import AnsiTerminal, StatusPrinter, success_mark, warning_mark

    terminal = AnsiTerminal()
    status = StatusPrinter(terminal)

    if args.command == "caps":
        for name, ok in [
            ("color", terminal.supports_color),
            ("emoji", terminal.supports_emoji),
        ]:
            mark = success_mark(terminal) if ok else warning_mark(terminal)
            status.print_status(f"{mark} {name}")
        return 0

    elif args.command == "ask":
        terminal.uses_terminal_ui = True
        coro = terminal.prompt_for_char_input(
            args.chars,
            status,
            prompt=args.message,
            default_choice_index=args.default,
            display_accepted_characters=not args.hide_choices,
        )
        try:
            choice = asyncio.run(coro)
        except ValueError as err:
            parser.error(str(err))
        except (EOFError, KeyboardInterrupt):
            return 1
        print(choice)
        return 0

    parser.print_help()
    return 2
