"""Compatibilidad multiplataforma.

Por qué un adaptador:
- La orquestación no pregunta por el SO salvo donde es inevitable (nombres
  reservados, avisos de permisos).
- Todas las funciones dependientes del SO aceptan `platform=` para poder
  simular Windows/POSIX en tests sin tocar `sys.platform`.
"""

from __future__ import annotations

import os
import platform as _platform
import re
import sys
import tempfile
from pathlib import Path

from core.domain.models import SystemInfo, ValidationResult

MAX_NAME_LENGTH = 255

_WINDOWS_RESERVED = re.compile(r"^(CON|PRN|AUX|NUL|COM[1-9]|LPT[1-9])$", re.IGNORECASE)
_WINDOWS_INVALID_CHARS = re.compile(r'[<>:"/\\|?*]')
_POSIX_INVALID_CHARS = re.compile(r"[/\x00]")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

_SLUG_INVALID = re.compile(r"[^a-z0-9-]")
_SLUG_DASHES = re.compile(r"-+")
_LEADING_NPM = re.compile(r"^npm(?=\s|$)")


def _host(platform: str | None) -> str:
    return platform if platform is not None else sys.platform


# ---------------------------------------------------------------------------
# Detección de SO
# ---------------------------------------------------------------------------


def is_windows(*, platform: str | None = None) -> bool:
    return _host(platform) == "win32"


def is_macos(*, platform: str | None = None) -> bool:
    return _host(platform) == "darwin"


def is_linux(*, platform: str | None = None) -> bool:
    return _host(platform).startswith("linux")


def os_name(*, platform: str | None = None) -> str:
    host = _host(platform)
    if is_windows(platform=host):
        return "Windows"
    if is_macos(platform=host):
        return "macOS"
    if is_linux(platform=host):
        return "Linux"
    return host


# ---------------------------------------------------------------------------
# Rutas
# ---------------------------------------------------------------------------


def normalize_path(path: str | os.PathLike[str]) -> Path:
    return Path(os.path.normpath(path))


def join_path(*segments: str | os.PathLike[str]) -> Path:
    return Path(*segments)


def resolve_path(*segments: str | os.PathLike[str]) -> Path:
    """Ruta absoluta y normalizada; un segmento absoluto reinicia la composición.

    No resuelve symlinks (a diferencia de `Path.resolve`).
    """

    return Path(os.path.abspath(os.path.join(os.getcwd(), *segments)))


def home_dir() -> Path:
    return Path.home()


def temp_dir() -> Path:
    return Path(tempfile.gettempdir())


def get_env_var(name: str, default: str = "") -> str:
    return os.environ.get(name) or default


# ---------------------------------------------------------------------------
# Nombres de fichero / proyecto
# ---------------------------------------------------------------------------


def _code_units(value: str) -> int:
    # Longitud en unidades UTF-16, como la cuentan los sistemas de ficheros de Windows.
    return len(value.encode("utf-16-le")) // 2


def validate_file_name(name: str | None, *, platform: str | None = None) -> ValidationResult:
    """Valida un nombre de proyecto contra las reglas del host.

    Reglas (gana la primera que falla):
    - vacío o solo espacios
    - más de 255 unidades de código
    - empieza por `.`
    - Windows: nombres reservados, caracteres `< > : " / \\ | ? *`, final en espacio o punto
    - POSIX: `/` o NUL
    - cualquier SO: caracteres de control ASCII
    """

    if not name or not name.strip():
        return ValidationResult.fail("Project name must not be empty")

    if _code_units(name) > MAX_NAME_LENGTH:
        return ValidationResult.fail(f"Project name must not exceed {MAX_NAME_LENGTH} characters")

    if name.startswith("."):
        return ValidationResult.fail("Project name must not start with a dot")

    if is_windows(platform=platform):
        if _WINDOWS_RESERVED.match(name):
            return ValidationResult.fail(
                f'"{name}" is a reserved name on Windows, please choose another one'
            )
        if _WINDOWS_INVALID_CHARS.search(name):
            return ValidationResult.fail(
                'Windows does not allow these characters in file names: < > : " / \\ | ? *'
            )
        if name.endswith((" ", ".")):
            return ValidationResult.fail("Windows does not allow file names ending in a space or a dot")
    elif _POSIX_INVALID_CHARS.search(name):
        return ValidationResult.fail("Project name must not contain / or the NUL character")

    if _CONTROL_CHARS.search(name):
        return ValidationResult.fail("Project name must not contain control characters")

    return ValidationResult.ok()


def format_project_name(name: str) -> str:
    """Normaliza a slug apto para URL/paquete (kebab-case). Idempotente."""

    slug = _SLUG_INVALID.sub("-", name.lower())
    slug = _SLUG_DASHES.sub("-", slug)
    return slug.strip("-")


# ---------------------------------------------------------------------------
# Utilidades
# ---------------------------------------------------------------------------


def format_command(command: str, *, platform: str | None = None) -> str:
    """Formato de comando para mostrar al usuario (nunca se ejecuta)."""

    if is_windows(platform=platform):
        return _LEADING_NPM.sub("npm.cmd", command)
    return command


def get_eol() -> str:
    return os.linesep


def get_system_info() -> SystemInfo:
    return SystemInfo(
        platform=sys.platform,
        arch=_platform.machine() or "unknown",
        os_name=os_name(),
        runtime_version=_platform.python_version(),
        home_dir=home_dir(),
        temp_dir=temp_dir(),
        path_separator=os.sep,
        path_delimiter=os.pathsep,
    )
