"""CLI principal (Typer).

Comandos:
- `create <project-name>`: crea un proyecto nuevo en un subdirectorio.
- `init`: igual que `create .` (materializa en el directorio actual).
- `doctor`: diagnóstico del entorno.
"""

from __future__ import annotations

import asyncio
import typer
from rich.console import Console
from rich.markup import escape

from adapters.template_downloader import ArchiveTemplateFetcher
from cli import doctor
from cli.console_reporter import ConsoleReporter
from cli.prompts import RichPrompter
from cli.ui_components import print_system_info
from core.config import APP_NAME, AppSettings, __version__
from core.domain.models import CURRENT_DIRECTORY, TemplateKey
from core.errors import ScaffoldError
from core.platform_adapter import get_system_info
from core.services.project_creator import ProjectCreator

EXAMPLES = f"""[yellow]Examples:[/yellow]

  $ {APP_NAME} create my-react-app

  $ {APP_NAME} create my-vue-app -t vue

  $ {APP_NAME} init -t react
"""

app = typer.Typer(
    name=APP_NAME,
    no_args_is_help=True,
    help="Scaffold a new frontend project from a remote template.",
    epilog=EXAMPLES,
    rich_markup_mode="rich",
    add_completion=False,
)
app.command(name="doctor")(doctor.run)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{APP_NAME} {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Scaffold a new frontend project from a remote template."""


def build_creator(settings: AppSettings) -> ProjectCreator:
    return ProjectCreator(
        prompter=RichPrompter(console),
        fetcher=ArchiveTemplateFetcher(settings),
        reporter=ConsoleReporter(console),
    )


def _run_creation(project_name: str, template: str | None) -> None:
    settings = AppSettings()
    if settings.debug_enabled:
        print_system_info(console, get_system_info())

    creator = build_creator(settings)
    try:
        # Una clave desconocida equivale a no indicar plantilla: se pregunta.
        asyncio.run(creator.create(project_name, TemplateKey.parse(template)))
    except ScaffoldError as exc:
        console.print(f"[red]✗ Error creating project:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.command()
def create(
    project_name: str = typer.Argument(..., metavar="PROJECT-NAME", help="Name of the new project directory."),
    template: str | None = typer.Option(
        TemplateKey.default().value, "--template", "-t", help="Project template (react/vue)."
    ),
) -> None:
    """Create a new frontend project."""

    console.print(f"[blue]🚀 Creating project: {escape(project_name)}[/blue]")
    _run_creation(project_name, template)


@app.command()
def init(
    template: str | None = typer.Option(
        TemplateKey.default().value, "--template", "-t", help="Project template (react/vue)."
    ),
) -> None:
    """Initialize a project in the current directory."""

    console.print("[blue]🚀 Initializing project in the current directory[/blue]")
    _run_creation(CURRENT_DIRECTORY, template)


def run() -> None:
    app()
