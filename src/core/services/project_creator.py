"""Orquestación de la creación de proyectos.

Secuencia lineal, sin vuelta atrás:

    ResolveTemplate -> ResolveTarget -> HandleConflict -> Materialize -> Finalize

Estados terminales: `SUCCESS`, `ABORTED` (el usuario no quiso sobrescribir) o
una `ScaffoldError` propagada. El Core no imprime directamente: todo pasa por
el `Reporter`, así la CLI decide colores y spinners.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from adapters.package_manifest import update_package_json
from core.domain.models import (
    CURRENT_DIRECTORY,
    CreationOutcome,
    CreationRequest,
    CreationResult,
    TemplateKey,
)
from core.domain.templates import get_template, template_choices
from core.errors import DownloadError, FilesystemError, InvalidNameError
from core.interfaces import Prompter, Reporter, TemplateFetcher
from core.platform_adapter import format_command, is_windows, resolve_path, validate_file_name

NEXT_STEP_COMMANDS = ("npm install", "npm start")


class ProjectCreator:
    """Crea un proyecto a partir de una plantilla remota."""

    def __init__(
        self,
        prompter: Prompter,
        fetcher: TemplateFetcher,
        reporter: Reporter,
        *,
        cwd: Path | None = None,
        platform: str | None = None,
    ) -> None:
        self._prompter = prompter
        self._fetcher = fetcher
        self._reporter = reporter
        self._cwd = cwd
        self._platform = platform

    async def create(self, project_name: str, template: TemplateKey | None = None) -> CreationResult:
        key = self._resolve_template(template)
        request = self._resolve_target(project_name, key)

        if not self._handle_conflict(request):
            self._reporter.warning("Creation cancelled")
            return CreationResult(outcome=CreationOutcome.ABORTED, request=request)

        await self._materialize(request)
        return self._finalize(request)

    # -- States ------------------------------------------------------------

    def _resolve_template(self, template: TemplateKey | None) -> TemplateKey:
        if template is not None:
            return template
        return self._prompter.ask_choice("Select a project template:", template_choices())

    def _resolve_target(self, project_name: str, template: TemplateKey) -> CreationRequest:
        if project_name != CURRENT_DIRECTORY:
            result = validate_file_name(project_name, platform=self._platform)
            if not result.valid:
                raise InvalidNameError(result.error or "Invalid project name")

        cwd = self._cwd if self._cwd is not None else Path(os.getcwd())
        return CreationRequest(
            project_name=project_name,
            template=template,
            target_path=resolve_path(cwd, project_name),
        )

    def _handle_conflict(self, request: CreationRequest) -> bool:
        """False si el usuario rechaza sobrescribir; en ese caso no se toca nada."""

        target = request.target_path
        if request.in_current_directory or not os.path.lexists(target):
            return True

        overwrite = self._prompter.ask_confirm(
            f"Directory {request.project_name} already exists. Overwrite?",
            default=False,
        )
        if not overwrite:
            return False

        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as exc:
            raise FilesystemError(f"Could not remove {target}: {exc}") from exc
        return True

    async def _materialize(self, request: CreationRequest) -> None:
        descriptor = get_template(request.template)
        if not request.in_current_directory:
            try:
                request.target_path.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise FilesystemError(f"Could not create {request.target_path}: {exc}") from exc

        with self._reporter.progress(f"Downloading {descriptor.display_name} template...") as handle:
            try:
                await self._fetcher.fetch(descriptor.source, request.target_path)
            except Exception as exc:
                handle.fail("Template download failed")
                if isinstance(exc, DownloadError):
                    raise
                raise DownloadError(f"Template download failed: {exc}") from exc
            handle.succeed("Template downloaded")

    def _finalize(self, request: CreationRequest) -> CreationResult:
        updated = False
        if not request.in_current_directory:
            updated = update_package_json(request.target_path, request.project_name)
            if updated:
                self._reporter.info(f"package.json name set to {request.project_name}")

        steps = self.next_steps(request)
        self._reporter.success("Project created successfully!")
        self._reporter.next_steps(steps, windows=is_windows(platform=self._platform))
        return CreationResult(
            outcome=CreationOutcome.SUCCESS,
            request=request,
            next_steps=steps,
            package_json_updated=updated,
        )

    def next_steps(self, request: CreationRequest) -> list[str]:
        steps: list[str] = []
        if not request.in_current_directory:
            steps.append(f"cd {request.project_name}")
        steps.extend(format_command(cmd, platform=self._platform) for cmd in NEXT_STEP_COMMANDS)
        return steps
