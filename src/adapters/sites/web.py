"""Handler web genérico: abre una URL tal cual."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from core.config import AppSettings
from core.domain.arguments import Arguments
from core.domain.models import WebCommand


def parse_url_arg(value: Any) -> str | None:
    """Acepta string, mapping con `url`, o secuencia (primer elemento)."""

    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, Mapping):
        url = value.get("url")
        return str(url) if url else None
    if isinstance(value, Arguments):
        return value.peek()
    if isinstance(value, Sequence):
        return str(value[0]) if value else None
    raise TypeError(f"unsupported url argument: {type(value).__name__}")


class WebAdapter:
    name = "web"

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def command_for(self, value: Any = None) -> WebCommand:
        url = parse_url_arg(value) or self._settings.home_url
        return WebCommand(url=url, site=self.name, action="open")

    def generate_command(self, args: Arguments) -> WebCommand:
        return self.command_for(args)

    def describe_routes(self) -> list[tuple[str, str]]:
        return [("", "<home_url>"), ("<url>", "<url>")]
