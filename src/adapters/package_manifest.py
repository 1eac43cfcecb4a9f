"""Reescritura de `package.json`.

Única personalización que hace la herramienta: el campo `name`.
El resto de claves se conserva en su orden original.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.errors import MetadataRewriteError
from core.platform_adapter import get_eol

PACKAGE_JSON = "package.json"


def update_package_json(target_dir: Path, project_name: str, *, eol: str | None = None) -> bool:
    """Sustituye `name` en `<target_dir>/package.json`.

    Devuelve False (sin error) si el fichero no existe. Escribe UTF-8 con
    indentación de 2 espacios y el fin de línea del host.
    """

    manifest_path = target_dir / PACKAGE_JSON
    if not manifest_path.is_file():
        return False

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MetadataRewriteError(f"Could not read {manifest_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise MetadataRewriteError(f"{manifest_path} does not contain a JSON object")

    data["name"] = project_name
    payload = json.dumps(data, ensure_ascii=False, indent=2) + "\n"

    try:
        manifest_path.write_text(payload, encoding="utf-8", newline=eol or get_eol())
    except OSError as exc:
        raise MetadataRewriteError(f"Could not write {manifest_path}: {exc}") from exc
    return True
