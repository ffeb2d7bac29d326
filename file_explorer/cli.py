"""
Interactive file explorer shell.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from file_explorer.container import DependencyContainer, container
from file_explorer.exceptions import BaseAppError, ConfigurationError

BANNER = (
    "---------------------------------------------\n"
    "   SIMPLE CONSOLE FILE EXPLORER\n"
    "---------------------------------------------\n"
    "Type 'help' to see available commands.\n"
)
HISTORY_HEADER = "----------- ACTIVITY LOG -----------"
HISTORY_FOOTER = "------------------------------------"
NO_HISTORY = "No activity history found yet."
UNKNOWN_COMMAND = "Unknown command. Type 'help' for list."
GOODBYE = "Goodbye! Have a nice day :)"

EXIT_COMMANDS = ("exit", "quit")

HELP_ROWS = [
    ("ls [path]", "List files and folders"),
    ("cd <dir>", "Change directory"),
    ("pwd", "Print current directory"),
    ("cp <src> <dest>", "Copy file"),
    ("mv <src> <dest>", "Move or rename file"),
    ("rm <path>", "Delete file/folder"),
    ("touch <file>", "Create empty file"),
    ("mkdir <dir>", "Create new folder"),
    ("search <pattern> [root]", "Search entries by name"),
    ("history", "Show activity log"),
    ("help", "Show help menu"),
    ("exit | quit", "Exit explorer"),
]


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def _printable(text: str) -> str:
    # File names that are not valid UTF-8 arrive with surrogate escapes
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


@dataclass(frozen=True)
class _Command:
    handler: Callable[[list[str]], None]
    min_args: int = 0
    usage: str = ""


class ExplorerShell:
    """
    Read-tokenize-dispatch loop over the file explorer use cases.

    Every failure is printed and control returns to the prompt; only
    ``exit``/``quit``, end of input or Ctrl+C at the prompt end the loop.
    """

    def __init__(
        self,
        deps: DependencyContainer,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[str], str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            deps: Container providing the session and use cases
            console: Console receiving all output
            read_line: Reads one line after showing the prompt; raises EOFError at end of input
            logger: Logger instance to use for logging
        """
        self._deps = deps
        self._session = deps.get_session()
        self._console = console or Console(soft_wrap=True, highlight=False)
        self._read_line = read_line or (lambda prompt: self._console.input(Text(prompt)))
        self._logger = logger or logging.getLogger(__name__)
        self._commands: dict[str, _Command] = {
            "help": _Command(self._help),
            "ls": _Command(self._ls),
            "cd": _Command(self._cd, 1, "Usage: cd <dir>"),
            "pwd": _Command(self._pwd),
            "cp": _Command(self._cp, 2, "Usage: cp <src> <dest>"),
            "mv": _Command(self._mv, 2, "Usage: mv <src> <dest>"),
            "rm": _Command(self._rm, 1, "Usage: rm <path>"),
            "touch": _Command(self._touch, 1, "Usage: touch <file>"),
            "mkdir": _Command(self._mkdir, 1, "Usage: mkdir <dir>"),
            "search": _Command(self._search, 1, "Usage: search <pattern> [root]"),
            "history": _Command(self._history),
        }

    # ------------------------- output helpers -------------------------
    def _out(self, text: str, style: Optional[str] = None) -> None:
        self._console.print(_printable(text), style=style, markup=False, highlight=False)

    def _error(self, command: str, error: BaseAppError) -> None:
        self._out(f"{command}: {error}", style="red")

    # ------------------------- loop -------------------------
    def run(self) -> int:
        self._out(BANNER)
        while True:
            try:
                line = self._read_line(self._session.prompt())
            except EOFError:
                break
            except KeyboardInterrupt:
                self._out("")
                break
            if not self.execute_line(line):
                break
        self._out("\n" + GOODBYE)
        return 0

    def execute_line(self, line: str) -> bool:
        """
        Run one input line.

        Returns:
            False when the line asks to leave the shell, True otherwise
        """
        args = line.split()
        if not args:
            return True

        name, params = args[0], args[1:]
        if name in EXIT_COMMANDS:
            return False

        command = self._commands.get(name)
        if command is None:
            self._out(UNKNOWN_COMMAND)
            return True
        if len(params) < command.min_args:
            self._out(command.usage)
            return True

        self._logger.debug(f"Dispatching {name} {params}")
        try:
            command.handler(params)
        except BaseAppError as e:
            self._error(name, e)
        return True

    # ------------------------- commands -------------------------
    def _help(self, params: list[str]) -> None:
        tbl = Table(title="Available Commands", box=box.MINIMAL_DOUBLE_HEAD)
        tbl.add_column("Command", style="cyan", no_wrap=True)
        tbl.add_column("Description")
        for usage, description in HELP_ROWS:
            tbl.add_row(Text(usage), description)
        self._console.print(tbl)

    def _ls(self, params: list[str]) -> None:
        path = params[0] if params else "."
        entries = self._deps.get_list_files_use_case().execute(self._session, path)
        self._out(f"Contents of {path}:")
        for entry in entries:
            self._out(entry.format_line())

    def _cd(self, params: list[str]) -> None:
        self._deps.get_change_directory_use_case().execute(self._session, params[0])
        self._out(f"Changed directory to: {params[0]}", style="green")

    def _pwd(self, params: list[str]) -> None:
        self._out(self._deps.get_print_directory_use_case().execute(self._session))

    def _cp(self, params: list[str]) -> None:
        src, dest = params[0], params[1]
        self._deps.get_copy_file_use_case().execute(self._session, src, dest)
        self._out(f"Copied: {src} -> {dest}", style="green")

    def _mv(self, params: list[str]) -> None:
        src, dest = params[0], params[1]
        self._deps.get_move_file_use_case().execute(self._session, src, dest)
        self._out(f"Moved: {src} -> {dest}", style="green")

    def _rm(self, params: list[str]) -> None:
        report = self._deps.get_remove_path_use_case().execute(self._session, params[0])
        if report.skipped:
            self._out(
                f"rm: could not remove {_plural(len(report.skipped), 'entry', 'entries')}",
                style="yellow",
            )

    def _touch(self, params: list[str]) -> None:
        self._deps.get_touch_file_use_case().execute(self._session, params[0])
        self._out(f"File created/updated: {params[0]}", style="green")

    def _mkdir(self, params: list[str]) -> None:
        self._deps.get_make_directory_use_case().execute(self._session, params[0])
        self._out(f"Directory created: {params[0]}", style="green")

    def _search(self, params: list[str]) -> None:
        pattern = params[0]
        root = params[1] if len(params) > 1 else "."
        report = self._deps.get_search_files_use_case().execute(
            self._session, pattern, root
        )
        for match in report.matches:
            self._out(match)
        if report.skipped:
            count = _plural(len(report.skipped), "unreadable directory", "unreadable directories")
            self._out(f"search: skipped {count}", style="yellow")

    def _history(self, params: list[str]) -> None:
        lines = self._deps.get_show_history_use_case().execute()
        if lines is None:
            self._out(NO_HISTORY)
            return
        self._out(HISTORY_HEADER)
        for line in lines:
            self._out(line)
        self._out(HISTORY_FOOTER)


def main() -> int:
    """Start the interactive explorer in the current directory."""
    from file_explorer.config.settings import Settings

    try:
        settings = Settings()
    except ConfigurationError as e:
        Console(stderr=True, soft_wrap=True).print(
            f"Configuration error: {e}", style="red", markup=False, highlight=False
        )
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    console = Console(soft_wrap=True, highlight=False, no_color=not settings.color)
    return ExplorerShell(container, console).run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
