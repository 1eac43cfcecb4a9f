"""Descarga de plantillas desde repositorios remotos.

Formatos de referencia admitidos:
- `owner/name` (GitHub por defecto)
- `github:owner/name`, `gitlab:owner/name`, `bitbucket:owner/name`
- cualquiera de los anteriores con `#rama` al final
- `direct:<url>` a un `.zip`

Se descarga el archivo comprimido (sin `git clone`), se descarta el primer
componente de las rutas y se fusiona en el destino.
"""

from __future__ import annotations

import asyncio
import os
import re
import shutil
import tempfile
import zipfile
from pathlib import Path, PurePosixPath

import httpx
from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.errors import DownloadError

_HOSTS = ("github", "gitlab", "bitbucket")
_REFERENCE = re.compile(
    r"^(?:(?P<host>[a-z]+):)?(?P<owner>[^/:#\s]+)/(?P<name>[^/:#\s]+)(?:#(?P<checkout>\S+))?$"
)


class RepoReference(BaseModel):
    """Referencia parseada a un repositorio remoto."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(default="github")
    owner: str = ""
    name: str = ""
    checkout: str = Field(default="master", min_length=1)
    direct_url: str | None = None


def parse_repo_reference(source: str, *, default_checkout: str = "master") -> RepoReference:
    source = (source or "").strip()
    if source.startswith("direct:"):
        url = source[len("direct:") :]
        if not url.startswith(("http://", "https://")):
            raise DownloadError(f"Invalid direct template URL: {url!r}")
        return RepoReference(host="direct", checkout=default_checkout, direct_url=url)

    match = _REFERENCE.match(source)
    if not match:
        raise DownloadError(f"Invalid template repository reference: {source!r}")

    host = match.group("host") or "github"
    if host not in _HOSTS:
        raise DownloadError(f"Unsupported template host: {host!r}")

    return RepoReference(
        host=host,
        owner=match.group("owner"),
        name=match.group("name"),
        checkout=match.group("checkout") or default_checkout,
    )


def archive_url(ref: RepoReference) -> str:
    if ref.direct_url:
        return ref.direct_url
    if ref.host == "gitlab":
        return (
            f"https://gitlab.com/{ref.owner}/{ref.name}/-/archive/"
            f"{ref.checkout}/{ref.name}-{ref.checkout}.zip"
        )
    if ref.host == "bitbucket":
        return f"https://bitbucket.org/{ref.owner}/{ref.name}/get/{ref.checkout}.zip"
    return f"https://github.com/{ref.owner}/{ref.name}/archive/{ref.checkout}.zip"


def extract_archive(archive_path: Path, destination: Path, *, strip_components: int = 1) -> int:
    """Extrae un zip en `destination` descartando los primeros componentes de ruta.

    Devuelve el número de ficheros escritos. Cualquier entrada que salga de
    `destination` aborta la extracción.
    """

    root = destination.resolve()
    written = 0
    try:
        with zipfile.ZipFile(archive_path) as archive:
            for info in archive.infolist():
                parts = PurePosixPath(info.filename).parts[strip_components:]
                if not parts:
                    continue
                target = (root.joinpath(*parts)).resolve()
                if target != root and root not in target.parents:
                    raise DownloadError(f"Archive entry escapes destination: {info.filename}")
                if info.is_dir():
                    target.mkdir(parents=True, exist_ok=True)
                    continue
                target.parent.mkdir(parents=True, exist_ok=True)
                with archive.open(info) as src, target.open("wb") as dst:
                    shutil.copyfileobj(src, dst)
                mode = (info.external_attr >> 16) & 0o777
                if mode:
                    os.chmod(target, mode)
                written += 1
    except zipfile.BadZipFile as exc:
        raise DownloadError(f"Downloaded template is not a valid zip archive: {exc}") from exc
    return written


class ArchiveTemplateFetcher:
    """Implementa `TemplateFetcher` descargando el zip del repositorio con httpx."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self, source: str, destination: Path) -> None:
        ref = parse_repo_reference(source, default_checkout=self._settings.default_checkout)
        url = archive_url(ref)

        with tempfile.TemporaryDirectory(prefix="fe-scaffold-") as tmp:
            archive_path = Path(tmp) / "template.zip"
            await self._download(url, archive_path)
            written = await asyncio.to_thread(extract_archive, archive_path, destination)

        if written == 0:
            raise DownloadError(f"Template archive from {url} is empty")

    async def _download(self, url: str, archive_path: Path) -> None:
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                async with client.stream("GET", url) as response:
                    if response.status_code >= 400:
                        raise DownloadError(f"HTTP {response.status_code} while downloading {url}")
                    with archive_path.open("wb") as fh:
                        async for chunk in response.aiter_bytes():
                            fh.write(chunk)
        except httpx.HTTPError as exc:
            raise DownloadError(f"Could not download {url}: {exc}") from exc
