"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.opener import UrlOpener
from core.interfaces.site_adapter import SiteAdapter

__all__ = ["SiteAdapter", "UrlOpener"]
