import io

import pytest

from nmtshell.display import (
    clear_console,
    format_node,
    get_input,
    show_node,
    split_command,
    standard_display,
)
from nmtshell.nodes import NodeType


def test_standard_display_writes_verbatim():
    out = io.StringIO()
    standard_display("hello\n", out)
    assert out.getvalue() == "hello\n"


def test_format_folder_entry():
    line = format_node("docs", NodeType.FOLDER, 2)
    assert line == "    \033[31m* \033[0m\033[38;2;255;187;171mdocs/\033[0m"


def test_format_file_entry_at_top_level():
    line = format_node("a", NodeType.FILE, 0)
    assert line == "\033[31m* \033[0m\033[38;2;255;255;255ma\033[0m"


def test_show_node_adds_newline():
    out = io.StringIO()
    show_node("a", NodeType.FILE, 1, out)
    assert out.getvalue() == format_node("a", NodeType.FILE, 1) + "\n"


def test_clear_console_sequence():
    out = io.StringIO()
    clear_console(out)
    assert out.getvalue() == "\033[2J\033[1;1H"


def test_get_input_reads_lines_then_eof():
    source = io.StringIO("ls\ncd docs")
    assert get_input(source) == "ls"
    assert get_input(source) == "cd docs"
    with pytest.raises(EOFError):
        get_input(source)


@pytest.mark.parametrize(
    "command, expected",
    [
        ("cd docs", ("cd", "docs")),
        ("ls", ("ls", "")),
        ("mv a b", ("mv", "a b")),
        ("", ("", "")),
    ],
)
def test_split_command(command, expected):
    assert split_command(command) == expected