"""Implementación Rich de `core.interfaces.Prompter`.

Las preguntas bloquean hasta que el usuario responde (sin timeout).
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from core.domain.models import TemplateKey


class RichPrompter:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask_choice(self, message: str, options: Sequence[tuple[str, TemplateKey]]) -> TemplateKey:
        """Lista numerada; se acepta el número o la clave de la plantilla."""

        self.console.print(f"[bold]{escape(message)}[/bold]")
        by_answer: dict[str, TemplateKey] = {}
        for index, (label, key) in enumerate(options, start=1):
            self.console.print(f"  [cyan]{index}[/cyan]) {escape(label)}")
            by_answer[str(index)] = key
            by_answer[key.value] = key

        answer = Prompt.ask(
            "Template",
            console=self.console,
            choices=list(by_answer),
            show_choices=False,
            default="1",
        )
        return by_answer[answer]

    def ask_confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(message, console=self.console, default=default)
