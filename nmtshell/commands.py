"""Command interpreter for the folder tree."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Optional, TextIO

from . import sysinfo
from .display import clear_console, show_node, standard_display
from .nodes import Folder, NodeType


def parse_command(line: str) -> tuple[str, str]:
    """Split a line at its first space into command and argument."""
    command, _, argument = line.partition(" ")
    return command, argument


class CommandHandler:
    """Runs shell commands against a folder tree."""

    def __init__(self, root: Folder, output: Optional[TextIO] = None) -> None:
        self.home = root
        self.current = root
        self.output = output if output is not None else sys.stdout
        self.running = True
        self._commands: dict[str, Callable[[str], None]] = {
            "clear": self._clear,
            "ls": self._ls,
            "tree": self._tree,
            "pwd": self._pwd,
            "neofetch": self._neofetch,
            "test": self._test,
            "rm": self._rm,
            "mv": self._mv,
            "exit": self._exit,
            "cd": self._cd,
            "mkdir": self._mkdir,
            "touch": self._touch,
        }

    @property
    def current_path(self) -> str:
        """Path of the current folder."""
        return self.current.path

    def execute(self, line: str) -> bool:
        """Run one input line; return whether the shell keeps running."""
        command, argument = parse_command(line)
        if not command:
            return True
        action = self._commands.get(command)
        if action is None:
            self._say(f"Unknown command: {command}\n")
        else:
            action(argument)
        return self.running

    def _say(self, text: str) -> None:
        standard_display(text, self.output)

    def _show(self, name: str, node_type: NodeType, level: int) -> None:
        show_node(name, node_type, level, self.output)

    def _clear(self, _arg: str) -> None:
        clear_console(self.output)

    def _ls(self, _arg: str) -> None:
        self.current.show_contents(self._show)

    def _tree(self, _arg: str) -> None:
        self.current.show_all(self._show, 0)

    def _pwd(self, _arg: str) -> None:
        self._say(self.current.path + "\n")

    def _neofetch(self, _arg: str) -> None:
        self._say(f"OS: {sysinfo.get_kernel_version()}\n")
        self._say(f"Host: {sysinfo.get_hostname()}\n")
        self._say(f"User: {sysinfo.get_username()}\n")

    def _test(self, _arg: str) -> None:
        self._say(sysinfo.platform_test_message() + "\n")

    def _rm(self, arg: str) -> None:
        try:
            self.current.remove(arg)
        except FileNotFoundError:
            self._say(f"bash: rm: {arg}: Doesn't exists\n")

    def _mv(self, arg: str) -> None:
        # Entries carry no content, so a move replaces the entry with a file.
        try:
            self.current.remove(arg)
        except FileNotFoundError:
            self._say(f"bash: cp: {arg}: Doesn't exists\n")
            return
        try:
            self.current.create(arg, NodeType.FILE)
        except FileExistsError:
            self._say(f"bash: cp: {arg}: File already exists with that name\n")

    def _exit(self, _arg: str) -> None:
        self.running = False

    def _cd(self, arg: str) -> None:
        if arg == "..":
            self.current = self.current.parent
            return
        if arg == "~":
            self.current = self.home
            return
        target = self.current.subfolder(arg)
        if target is None:
            self._say(f"bash: cd: {arg}: No such file or directory\n")
            return
        self.current = target

    def _mkdir(self, arg: str) -> None:
        try:
            self.current.create(arg, NodeType.FOLDER)
        except FileExistsError:
            self._say(f"bash: mkdir: {arg}: Directory already exists\n")

    def _touch(self, arg: str) -> None:
        try:
            self.current.create(arg, NodeType.FILE)
        except FileExistsError:
            self._say(f"bash: touch: {arg}: File already exists\n")