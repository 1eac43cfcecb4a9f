"""Contratos de los colaboradores externos del creador de proyectos.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- Los tests sustituyen prompts, descarga y consola por fakes sin tocar el Core.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import TemplateKey


@runtime_checkable
class Prompter(Protocol):
    """Preguntas interactivas bloqueantes (sin timeout)."""

    def ask_choice(self, message: str, options: Sequence[tuple[str, TemplateKey]]) -> TemplateKey:
        ...

    def ask_confirm(self, message: str, default: bool = False) -> bool:
        ...


@runtime_checkable
class TemplateFetcher(Protocol):
    """Descarga de un repositorio remoto a un directorio local.

    Reglas de diseño:
    - `fetch` es asíncrono: es el único punto de suspensión por I/O de red.
    - Un solo intento; cualquier fallo se señala lanzando una excepción.
    """

    async def fetch(self, source: str, destination: Path) -> None:
        ...


class ProgressHandle(Protocol):
    def succeed(self, message: str) -> None:
        ...

    def fail(self, message: str) -> None:
        ...


@runtime_checkable
class Reporter(Protocol):
    """Salida legible para el usuario (la CLI la implementa con Rich)."""

    def info(self, message: str) -> None:
        ...

    def success(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...

    def progress(self, message: str) -> AbstractContextManager[ProgressHandle]:
        ...

    def next_steps(self, steps: Sequence[str], *, windows: bool = False) -> None:
        ...
