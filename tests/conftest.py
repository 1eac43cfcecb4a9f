"""Shared pytest fixtures for the fe-scaffold test suite.

Provides test doubles for the creator's collaborators:
- ``FakePrompter``: scripted answers for choice/confirm prompts
- ``FakeFetcher``: writes a minimal template instead of downloading
- ``RecordingReporter``: captures every message and progress outcome
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

import pytest

from core.domain.models import TemplateKey


class FakePrompter:
    def __init__(self, choice: TemplateKey = TemplateKey.REACT, confirm: bool = False) -> None:
        self.choice = choice
        self.confirm = confirm
        self.choice_calls: list[tuple[str, list[tuple[str, TemplateKey]]]] = []
        self.confirm_calls: list[tuple[str, bool]] = []

    def ask_choice(self, message: str, options: Sequence[tuple[str, TemplateKey]]) -> TemplateKey:
        self.choice_calls.append((message, list(options)))
        return self.choice

    def ask_confirm(self, message: str, default: bool = False) -> bool:
        self.confirm_calls.append((message, default))
        return self.confirm


class FakeFetcher:
    """Simulates a template download by writing ``package.json`` into the destination."""

    def __init__(self, manifest: dict | None = None, error: Exception | None = None) -> None:
        self.manifest = manifest if manifest is not None else {"name": "template", "version": "0.1.0"}
        self.error = error
        self.calls: list[tuple[str, Path]] = []

    async def fetch(self, source: str, destination: Path) -> None:
        self.calls.append((source, destination))
        if self.error is not None:
            raise self.error
        if self.manifest:
            (destination / "package.json").write_text(json.dumps(self.manifest), encoding="utf-8")
        (destination / "README.md").write_text("# template\n", encoding="utf-8")


class _Handle:
    def __init__(self, reporter: "RecordingReporter") -> None:
        self._reporter = reporter

    def succeed(self, message: str) -> None:
        self._reporter.events.append(("succeed", message))

    def fail(self, message: str) -> None:
        self._reporter.events.append(("fail", message))


class RecordingReporter:
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []
        self.steps: list[str] = []
        self.windows_hint = False

    def info(self, message: str) -> None:
        self.events.append(("info", message))

    def success(self, message: str) -> None:
        self.events.append(("success", message))

    def warning(self, message: str) -> None:
        self.events.append(("warning", message))

    def error(self, message: str) -> None:
        self.events.append(("error", message))

    @contextmanager
    def progress(self, message: str) -> Iterator[_Handle]:
        self.events.append(("progress", message))
        yield _Handle(self)

    def next_steps(self, steps: Sequence[str], *, windows: bool = False) -> None:
        self.steps = list(steps)
        self.windows_hint = windows

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.events]

    def messages(self, kind: str) -> list[str]:
        return [message for k, message in self.events if k == kind]


@pytest.fixture
def prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated working directory without FE_SCAFFOLD_* variables."""

    for key in ("FE_SCAFFOLD_DEBUG", "FE_SCAFFOLD_HTTP_TIMEOUT_SECONDS", "FE_SCAFFOLD_DEFAULT_CHECKOUT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
