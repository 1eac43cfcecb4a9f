"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos (prompts,
  descarga, salida por consola).
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.collaborators import ProgressHandle, Prompter, Reporter, TemplateFetcher

__all__ = [
    "ProgressHandle",
    "Prompter",
    "Reporter",
    "TemplateFetcher",
]
