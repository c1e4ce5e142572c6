"""
CLI formatters for vars commands and the setup report.

Results the user may pipe (values, keys, the storage path) go to stdout;
everything else goes to stderr. Separating display logic from command
logic keeps the dispatcher free of markup.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from buildvars.application.probe import SetupReport, format_set_commands

logger = logging.getLogger(__name__)


def _make_console(stderr: bool) -> Console:
    return Console(stderr=stderr, soft_wrap=True, highlight=False, emoji=False)


class VarsFormatter:
    """
    Formatter for vars command output.

    Consoles can be injected for testing; by default rich resolves
    sys.stdout / sys.stderr at print time.
    """

    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None):
        self.out = out or _make_console(stderr=False)
        self.err = err or _make_console(stderr=True)

    # Plain results (stdout)

    def value(self, value: str) -> None:
        self.out.print(value, markup=False)

    def keys(self, keys: Sequence[str]) -> None:
        for key in keys:
            self.out.print(key, markup=False)

    def path(self, path: str) -> None:
        self.out.print(path, markup=False)

    # Messages (stderr)

    def stored(self, path: str) -> None:
        self.err.print(f"Key-value pair stored at the following path: {escape(path)}")

    def listed(self, path: str) -> None:
        self.err.print(f"\nAll the key-value pairs are stored at the following path: {escape(path)}")

    def nothing_stored(self) -> None:
        self.err.print("[yellow]There are no key-value pairs stored[/yellow]")

    def deleted(self, path: str) -> None:
        self.err.print(f"The key was deleted at the following path: {escape(path)}")

    def missing_key(self, key: str) -> None:
        self.err.print(f"[yellow]There is no value associated to the key '{escape(key)}'[/yellow]")

    def error(self, message: str) -> None:
        self.err.print(f"[red]Error:[/red] {escape(message)}")

    # Setup

    def configuration_error(self, config_path: Path, error: BaseException) -> None:
        self.err.print(
            "[red]There is an error in your buildvars configuration file "
            f"({escape(str(config_path))}). Please double check it.[/red]\n"
        )

    def setup_report(self, report: SetupReport, set_command: str) -> None:
        """Render the keys still to set, then those already satisfied."""
        if report.nothing_to_set:
            self.out.print("[green]There are no key-value pairs to setup[/green]")
            self._already_set(report)
            return

        self.out.print("The following key-value pairs need to be setup:")

        if report.required_to_set:
            self.out.print("[red]<mandatory variables>[/red]")
            for line in format_set_commands(report.required_to_set, set_command):
                self.out.print(f"[red]{escape(line)}[/red]")

        if report.optional_to_set:
            self.out.print("[yellow]<optional variables>[/yellow]")
            for line in format_set_commands(report.optional_to_set, set_command):
                self.out.print(f"[yellow]{escape(line)}[/yellow]")

        self._already_set(report)

    def _already_set(self, report: SetupReport) -> None:
        if not report.has_already_set:
            return

        self.out.print("\n[green]<already set variables>[/green]")

        if report.required_already_set:
            self.out.print("<mandatory>", markup=False)
            self.keys(report.required_already_set)

        if report.optional_already_set:
            self.out.print("<optional>", markup=False)
            self.keys(report.optional_already_set)

        if report.env_vars:
            self.out.print("<environment variables with values>", markup=False)
            self.keys(report.env_vars)
