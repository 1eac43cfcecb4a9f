"""Registro de plantillas.

Tabla inmutable creada al importar el módulo: no hay registro mutable en runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from core.domain.models import TemplateDescriptor, TemplateKey

TEMPLATES: Mapping[TemplateKey, TemplateDescriptor] = MappingProxyType(
    {
        TemplateKey.REACT: TemplateDescriptor(
            key=TemplateKey.REACT,
            display_name="React project",
            source="DingYiWeiJE/EvayWeb",
            description="React template based on Create React App",
        ),
        TemplateKey.VUE: TemplateDescriptor(
            key=TemplateKey.VUE,
            display_name="Vue project",
            source="DingYiWeiJE/EvayVue",
            description="Vue template based on Vue CLI",
        ),
    }
)


def get_template(key: TemplateKey) -> TemplateDescriptor:
    return TEMPLATES[key]


def template_choices() -> list[tuple[str, TemplateKey]]:
    """Opciones `(label, key)` para el prompt de selección, en orden de registro."""

    return [(descriptor.choice_label, key) for key, descriptor in TEMPLATES.items()]
