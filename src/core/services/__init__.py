"""Servicios del Core.

Por qué aquí:
- El dispatch (handler + runner) y la resolución de refs no dependen de la CLI.
- Los adaptadores y la CLI comparten una única implementación de ambos.
"""

from core.services.dispatcher import CommandHandler, Runner
from core.services.url_resolver import UrlResolver, expand_ref, resolve_repo

__all__ = ["CommandHandler", "Runner", "UrlResolver", "expand_ref", "resolve_repo"]
