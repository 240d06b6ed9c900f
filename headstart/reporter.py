"""Progress reporting for plan execution.

The executor only talks to a ``ProgressSink``.  ``RichReporter`` renders the
events as status lines and a progress bar; installers inherit the terminal,
so the reporter prints line by line instead of holding a live display that
their output would tear.
"""

from __future__ import annotations

from typing import Optional, Protocol

from rich.console import Console
from rich.progress_bar import ProgressBar
from rich.table import Table

from headstart.utils import console as default_console
from headstart.utils import err_console as default_err_console


class ProgressSink(Protocol):
    """Receiver of executor progress events."""

    def on_start(self, feature: str, label: str) -> None: ...

    def on_success(self, feature: str, label: str) -> None: ...

    def on_failure(self, feature: str, label: str, error: str) -> None: ...

    def on_progress(self, completed: int, total: int) -> None: ...


class NullSink:
    """Sink that discards every event."""

    def on_start(self, feature: str, label: str) -> None:
        pass

    def on_success(self, feature: str, label: str) -> None:
        pass

    def on_failure(self, feature: str, label: str, error: str) -> None:
        pass

    def on_progress(self, completed: int, total: int) -> None:
        pass


class RichReporter:
    """Render progress events with Rich.

    Args:
        console: Console for status lines and the progress bar.
        err_console: Console failures are written to.
        bar_width: Width of the progress bar in cells.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        bar_width: int = 30,
    ) -> None:
        self.console = console or default_console
        self.err_console = err_console or default_err_console
        self.bar_width = bar_width

    def on_start(self, feature: str, label: str) -> None:
        self.console.print(f"[yellow]...[/yellow] {label}")

    def on_success(self, feature: str, label: str) -> None:
        self.console.print(f"[green]OK[/green]  {label} completed successfully.")

    def on_failure(self, feature: str, label: str, error: str) -> None:
        self.err_console.print(f"[bold red]FAIL[/bold red] {label} failed. Error: {error}")

    def on_progress(self, completed: int, total: int) -> None:
        if total <= 0:
            return
        percent = int(completed * 100 / total)
        grid = Table.grid(padding=(0, 1))
        grid.add_row(
            ProgressBar(total=total, completed=completed, width=self.bar_width),
            f"{percent}%",
            f"({completed}/{total})",
        )
        self.console.print(grid)
