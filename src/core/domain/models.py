"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación en el borde (nombre, ruta, plantilla) sin acoplar el Core a la CLI.
- Los modelos son inmutables (`frozen`): una petición se construye una vez por
  invocación y se descarta al terminar.

Nota:
- Estos modelos describen *qué* se crea, no *cómo* se descarga ni se escribe.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

CURRENT_DIRECTORY = "."


class TemplateKey(str, Enum):
    """Identificadores de plantilla soportados."""

    REACT = "react"
    VUE = "vue"

    @classmethod
    def default(cls) -> "TemplateKey":
        return cls.REACT

    @classmethod
    def parse(cls, value: str | None) -> "TemplateKey | None":
        """Interpret a user-supplied key; unknown or missing values yield ``None``."""

        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class TemplateDescriptor(BaseModel):
    """Una plantilla remota registrada."""

    model_config = ConfigDict(frozen=True)

    key: TemplateKey
    display_name: str = Field(..., min_length=1)
    source: str = Field(
        ...,
        min_length=3,
        description="Referencia al repositorio remoto (p.ej. 'owner/name' o 'github:owner/name#branch').",
    )
    description: str = ""

    @property
    def choice_label(self) -> str:
        return f"{self.display_name} - {self.description}"


class CreationRequest(BaseModel):
    """Petición de creación, resuelta a partir de la CLI y de las respuestas interactivas."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1)
    template: TemplateKey
    target_path: Path

    @property
    def in_current_directory(self) -> bool:
        """True cuando se materializa en el directorio actual (`.`)."""

        return self.project_name == CURRENT_DIRECTORY


class ValidationResult(BaseModel):
    """Resultado de validar un nombre: nunca se expresa como excepción."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True, error=None)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        return cls(valid=False, error=error)


class SystemInfo(BaseModel):
    """Foto de diagnóstico del host (solo lectura)."""

    model_config = ConfigDict(frozen=True)

    platform: str
    arch: str
    os_name: str
    runtime_version: str
    home_dir: Path
    temp_dir: Path
    path_separator: str
    path_delimiter: str


class CreationOutcome(str, Enum):
    """Estados terminales sin error. Los fallos se propagan como `ScaffoldError`."""

    SUCCESS = "success"
    ABORTED = "aborted"


@dataclass
class CreationResult:
    """Output of a ``ProjectCreator.create`` invocation."""

    outcome: CreationOutcome
    request: CreationRequest | None = None
    next_steps: list[str] = field(default_factory=list)
    package_json_updated: bool = False
