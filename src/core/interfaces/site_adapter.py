"""Contratos de adaptadores de sitios.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que adaptadores (GitHub, APIdock, web genérico) sean intercambiables
  y testeables sin acoplar el dispatcher a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.arguments import Arguments
from core.domain.models import WebCommand


@runtime_checkable
class SiteAdapter(Protocol):
    """Contrato mínimo para un adaptador de sitio.

    Reglas de diseño:
    - `generate_command` es puro: mismos argumentos, mismo `WebCommand`.
    - Siempre devuelve un comando utilizable (fallback propio) o lanza `UsageError`.
    """

    name: str

    def generate_command(self, args: Arguments) -> WebCommand:
        """Traduce los tokens en el comando a ejecutar."""

        ...

    def describe_routes(self) -> list[tuple[str, str]]:
        """Pares (tokens, plantilla de URL) para la ayuda de la CLI."""

        ...
