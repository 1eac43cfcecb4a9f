"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/descarga) lean config de forma consistente.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__version__ = "1.0.0"

APP_NAME = "fe-scaffold"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="FE_SCAFFOLD_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    debug: str = Field(
        default="",
        description="Cualquier valor no vacío activa el volcado de información del sistema.",
    )

    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout por request al descargar plantillas (segundos).",
    )
    user_agent: str = Field(
        default=f"{APP_NAME}/{__version__}",
        min_length=1,
        description="User-Agent para las descargas.",
    )
    default_checkout: str = Field(
        default="master",
        min_length=1,
        description="Rama usada cuando la referencia del repo no incluye `#checkout`.",
    )

    @property
    def debug_enabled(self) -> bool:
        return bool(self.debug.strip())
