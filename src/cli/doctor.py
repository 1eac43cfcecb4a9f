"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import shutil

from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli.ui_components import build_system_info_table, print_banner
from core.config import AppSettings
from core.platform_adapter import get_system_info, is_windows

_console = Console()

TEMPLATE_HOST = "https://github.com"


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.head(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_tool(name: str) -> tuple[bool, str]:
    found = shutil.which(name)
    if not found and is_windows():
        found = shutil.which(f"{name}.cmd")
    return (True, found) if found else (False, "not found on PATH")


def run() -> None:
    """Run baseline diagnostics (platform, template host, npm/git)."""

    settings = AppSettings()

    print_banner(_console)
    _console.print(build_system_info_table(get_system_info()))

    table = Table(title="fe-scaffold doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_http, detail_http = asyncio.run(_check_http(TEMPLATE_HOST, settings))
    table.add_row("Template host", "OK" if ok_http else "FAIL", f"{TEMPLATE_HOST} -> {detail_http}")
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # npm es necesario para los pasos siguientes; git es opcional
    ok_npm, detail_npm = _check_tool("npm")
    table.add_row("npm", "OK" if ok_npm else "FAIL", detail_npm)
    ok_git, detail_git = _check_tool("git")
    table.add_row("git", "OK" if ok_git else "OPTIONAL", detail_git)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Templates are downloaded from GitHub; check your proxy or network settings."
        )
