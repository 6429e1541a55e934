"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2, dataclasses, enums).
- El dominio no conoce la CLI ni el navegador: solo argumentos, variantes y URLs.
"""

from core.domain.arguments import Arguments
from core.domain.models import ApiDockMode, ApiDockSubsite, GitHubAction, WebCommand

__all__ = [
    "ApiDockMode",
    "ApiDockSubsite",
    "Arguments",
    "GitHubAction",
    "WebCommand",
]
