"""Implementación Rich de `core.interfaces.Reporter`."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Sequence

from rich.console import Console
from rich.markup import escape

from cli.ui_components import print_next_steps


class _StatusHandle:
    def __init__(self, console: Console) -> None:
        self._console = console

    def succeed(self, message: str) -> None:
        self._console.print(f"[green]✔[/green] {escape(message)}")

    def fail(self, message: str) -> None:
        self._console.print(f"[red]✗[/red] {escape(message)}")


class ConsoleReporter:
    """Salida humana con marcadores ✔ ✗ ⚠ ℹ y spinner durante la descarga."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def info(self, message: str) -> None:
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        self.console.print()
        self.console.print(f"[green]✔ {escape(message)}[/green]")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠ {escape(message)}[/yellow]")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @contextmanager
    def progress(self, message: str) -> Iterator[_StatusHandle]:
        handle = _StatusHandle(self.console)
        with self.console.status(escape(message), spinner="dots"):
            yield handle

    def next_steps(self, steps: Sequence[str], *, windows: bool = False) -> None:
        print_next_steps(self.console, steps, windows=windows)
