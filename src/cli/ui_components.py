"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles entre `create`, `init` y `doctor`.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import APP_NAME, __version__
from core.domain.models import SystemInfo

WINDOWS_PERMISSION_HINT = (
    "On Windows, if you run into permission errors, open the terminal as Administrator "
    "or check your antivirus exclusions for the project folder."
)


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text(APP_NAME, style="bold cyan")
    subtitle = Text(f"Frontend project scaffolding • v{__version__}", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_system_info_table(info: SystemInfo) -> Table:
    table = Table(title="System information", show_header=False)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Operating system", f"{info.os_name} ({info.platform})")
    table.add_row("Architecture", info.arch)
    table.add_row("Python", info.runtime_version)
    table.add_row("Path separator", f'"{info.path_separator}"')
    table.add_row("Path delimiter", f'"{info.path_delimiter}"')
    table.add_row("Home directory", str(info.home_dir))
    table.add_row("Temp directory", str(info.temp_dir))
    return table


def print_system_info(console: Console, info: SystemInfo) -> None:
    console.print(build_system_info_table(info))
    console.print()


def print_next_steps(console: Console, steps: Sequence[str], *, windows: bool = False) -> None:
    console.print()
    console.print("[yellow]Next steps:[/yellow]")
    for step in steps:
        console.print(f"  {step}", style="dim", markup=False, highlight=False)
    if windows:
        console.print()
        console.print(f"[yellow]⚠[/yellow] {WINDOWS_PERMISSION_HINT}")
    console.print()
