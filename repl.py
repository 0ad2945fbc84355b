import argparse
import logging
import sys

from varcalc import __version__
from varcalc.session import Session


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="varcalc", description="integer and string variable calculator")
    parser.add_argument("-q", "--quiet", action="store_true", help="don't print initial banner")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every statement to stderr")
    parser.add_argument("--version", action="version", version=f"varcalc {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    interactive = sys.stdin.isatty()
    prompt = "> " if interactive else ""
    if interactive and not args.quiet:
        print("Enter your program or type exit to quit: ")

    session = Session()
    while True:
        try:
            line = input(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            break

        if line.lower() == "exit":
            break
        if not line:
            continue

        for error in session.execute(line):
            print(f"error: {error}", file=sys.stderr)

        for variable_line in session.format_variables():
            print(variable_line)

    print("Exiting...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
