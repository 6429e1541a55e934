"""Adaptador de sitio: APIdock (documentación Ruby/Rails/RSpec).

Tabla de dispatch:
- primer token: rb|ruby, r|rails, rs|rspec -> sub-sitio
- segundo token `q` -> búsqueda; en otro caso -> lookup directo
- cualquier otro primer token (o ninguno) -> portada del sitio
"""

from __future__ import annotations

import logging

from core.config import AppSettings
from core.domain.arguments import Arguments
from core.domain.models import ApiDockMode, ApiDockSubsite, WebCommand
from core.errors import ArgumentCountError, MissingArgumentError

logger = logging.getLogger(__name__)


def query_url(base_url: str, subsite: ApiDockSubsite, term: str) -> str:
    return f"{base_url}/{subsite.value}/search?query={term}"


def lookup_url(base_url: str, subsite: ApiDockSubsite, term: str) -> str:
    return f"{base_url}/{subsite.value}/{term}"


_TEMPLATES = {
    ApiDockMode.QUERY: query_url,
    ApiDockMode.LOOKUP: lookup_url,
}


class ApiDockAdapter:
    """Traduce `apidock <sub-sitio> [q] <término>` en URLs de APIdock."""

    name = "apidock"

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    @property
    def base_url(self) -> str:
        return self._settings.apidock_url.rstrip("/")

    def generate_command(self, args: Arguments) -> WebCommand:
        token, args = args.advance()
        subsite = ApiDockSubsite.from_token(token)
        if subsite is None:
            logger.debug("no apidock sub-site for %r, opening the front page", token)
            return WebCommand(url=self.base_url, site=self.name, action="home")

        mode = ApiDockMode.from_token(args.peek())
        if mode is ApiDockMode.QUERY:
            _, args = args.advance()

        if not args:
            raise MissingArgumentError("term")
        if len(args) > 1:
            raise ArgumentCountError(f"{subsite.value} {mode.value}", len(args), "1")

        return WebCommand(
            url=_TEMPLATES[mode](self.base_url, subsite, args.peek()),
            site=self.name,
            action=f"{subsite.value}_{mode.value}",
        )

    def describe_routes(self) -> list[tuple[str, str]]:
        routes = [("", "<base>")]
        for subsite in ApiDockSubsite:
            tokens = "|".join(subsite.tokens)
            routes.append((f"{tokens} q <term>", query_url("<base>", subsite, "<term>")))
            routes.append((f"{tokens} <term>", lookup_url("<base>", subsite, "<term>")))
        return routes
