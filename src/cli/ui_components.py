"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de dispatch con detalles visuales.
- Permite reutilizar tablas/paneles en `routes` y `doctor`.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import WebCommand
from core.interfaces.site_adapter import SiteAdapter


def print_opened(console: Console, command: WebCommand) -> None:
    """Una línea discreta con lo que se acaba de abrir."""

    line = Text()
    line.append(f"{command.site}", style="bold cyan")
    line.append(f" {command.action} ", style="dim")
    line.append(command.url, style="magenta")
    console.print(line, soft_wrap=True)


def print_usage_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("Error: ", "bold red"), message))


def build_routes_table(command_name: str, adapter: SiteAdapter) -> Table:
    """Tabla con la tabla de dispatch de un adaptador."""

    table = Table(title=f"{command_name} ({adapter.name})")
    table.add_column("Arguments", style="cyan", no_wrap=True)
    table.add_column("URL", style="magenta")
    for tokens, template in adapter.describe_routes():
        table.add_row(f"{command_name} {tokens}".rstrip(), template)
    return table
