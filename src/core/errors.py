"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI traduce cualquier `ScaffoldError` a un único mensaje y exit code 1.
- El Core no conoce typer ni códigos de salida: solo lanza errores con texto claro.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base de todos los fallos que abortan una creación de proyecto."""


class InvalidNameError(ScaffoldError):
    """El nombre de proyecto no pasa las reglas de nombres de fichero del host."""


class DownloadError(ScaffoldError):
    """La descarga o extracción de la plantilla remota falló."""


class MetadataRewriteError(ScaffoldError):
    """No se pudo leer o reescribir `package.json` en el proyecto generado."""


class FilesystemError(ScaffoldError):
    """No se pudo borrar o crear el directorio destino (permisos, nombre demasiado largo...)."""
