"""Terminal output and input helpers."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .nodes import NodeType

_BULLET = "\033[31m* \033[0m"
_FOLDER_COLOUR = "\033[38;2;255;187;171m"
_FILE_COLOUR = "\033[38;2;255;255;255m"
_RESET = "\033[0m"
_CLEAR = "\033[2J\033[1;1H"


def standard_display(content: str, stream: Optional[TextIO] = None) -> None:
    """Write text as is."""
    (stream or sys.stdout).write(content)


def format_node(name: str, node_type: NodeType, level: int) -> str:
    """Return the coloured, indented line for a tree entry, without newline."""
    indent = "  " * level
    if node_type is NodeType.FOLDER:
        label = f"{_FOLDER_COLOUR}{name}/{_RESET}"
    else:
        label = f"{_FILE_COLOUR}{name}{_RESET}"
    return f"{indent}{_BULLET}{label}"


def show_node(
    name: str, node_type: NodeType, level: int, stream: Optional[TextIO] = None
) -> None:
    """Write one tree entry followed by a newline."""
    out = stream or sys.stdout
    out.write(format_node(name, node_type, level) + "\n")
    out.flush()


def clear_console(stream: Optional[TextIO] = None) -> None:
    """Clear the terminal and move the cursor home."""
    (stream or sys.stdout).write(_CLEAR)


def get_input(stream: Optional[TextIO] = None) -> str:
    """Read one line without its newline; raise EOFError at end of input."""
    line = (stream or sys.stdin).readline()
    if not line:
        raise EOFError
    return line[:-1] if line.endswith("\n") else line


def split_command(command: str) -> tuple[str, str]:
    """Split at the first space into the word and the rest."""
    head, _, rest = command.partition(" ")
    return head, rest