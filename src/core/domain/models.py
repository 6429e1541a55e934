"""Modelos del dominio (Pydantic v2 + enums).

Por qué enums con `from_token`:
- Cada adaptador es un switch sobre prefijos de texto; un enum por adaptador
  sustituye la jerarquía de clases (Commit, Pull, ... / Query, Lookup).
- La tabla de tokens vive junto a la variante que selecciona.

Nota:
- Estos modelos describen *qué* se abre, no *cómo* se abre.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class WebCommand(BaseModel):
    """Comando resuelto: una URL lista para abrirse.

    Por qué frozen:
    - Una vez construido, la URL no cambia; construir dos veces con los mismos
      argumentos produce el mismo comando.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        ...,
        min_length=1,
        description="URL final que se abrirá en el navegador.",
    )
    site: str = Field(
        default="web",
        min_length=1,
        description="Adaptador que generó el comando (p.ej. 'github', 'apidock').",
    )
    action: str = Field(
        default="open",
        min_length=1,
        description="Variante del adaptador (p.ej. 'commit', 'lookup').",
    )


class GitHubAction(str, Enum):
    """Variants of the source-hosting adapter."""

    OPEN_REPO = "open_repo"
    COMMIT = "commit"
    PULL = "pull"
    REF = "ref"
    PATH = "path"
    FILE = "file"
    DIFF = "diff"
    HISTORY = "history"
    BLAME = "blame"

    @property
    def tokens(self) -> tuple[str, ...]:
        return _GITHUB_TOKENS[self]

    @classmethod
    def from_token(cls, token: str) -> "GitHubAction | None":
        """Dispatch token -> action; `None` means the token is a bare commit hash."""

        for action, tokens in _GITHUB_TOKENS.items():
            if token in tokens:
                return action
        return None


_GITHUB_TOKENS: dict[GitHubAction, tuple[str, ...]] = {
    GitHubAction.OPEN_REPO: (),
    GitHubAction.COMMIT: ("c", "commit", "commits"),
    GitHubAction.PULL: ("p", "pull", "pulls"),
    GitHubAction.REF: ("r", "ref"),
    GitHubAction.PATH: ("pa", "path"),
    GitHubAction.FILE: ("f", "file"),
    GitHubAction.DIFF: ("d", "diff", "pr"),
    GitHubAction.HISTORY: ("h", "history"),
    GitHubAction.BLAME: ("b", "blame"),
}


class ApiDockSubsite(str, Enum):
    """Sub-sites of the documentation site; the value is the URL prefix."""

    RUBY = "ruby"
    RAILS = "rails"
    RSPEC = "rspec"

    @property
    def tokens(self) -> tuple[str, ...]:
        return _APIDOCK_TOKENS[self]

    @classmethod
    def from_token(cls, token: str | None) -> "ApiDockSubsite | None":
        for subsite, tokens in _APIDOCK_TOKENS.items():
            if token in tokens:
                return subsite
        return None


_APIDOCK_TOKENS: dict[ApiDockSubsite, tuple[str, ...]] = {
    ApiDockSubsite.RUBY: ("rb", "ruby"),
    ApiDockSubsite.RAILS: ("r", "rails"),
    ApiDockSubsite.RSPEC: ("rs", "rspec"),
}


class ApiDockMode(str, Enum):
    QUERY = "query"
    LOOKUP = "lookup"

    @classmethod
    def from_token(cls, token: str | None) -> "ApiDockMode":
        return cls.QUERY if token == "q" else cls.LOOKUP
