"""Interactive shell entry point."""

from __future__ import annotations

import argparse
import sys

from .commands import CommandHandler
from .display import get_input, standard_display
from .nodes import Folder


def main(argv=None) -> int:
    """Run the shell on standard input until exit or end of input."""
    parser = argparse.ArgumentParser(
        prog="nmtshell", description="A shell over an in-memory folder tree."
    )
    parser.parse_args(argv)

    handler = CommandHandler(Folder("~"), sys.stdout)
    running = True
    while running:
        standard_display(handler.current_path + "$ ", sys.stdout)
        sys.stdout.flush()
        try:
            line = get_input(sys.stdin)
        except EOFError:
            break
        running = handler.execute(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())