"""Reference resolution for repository-based URLs.

Repository abbreviations and refs are passed through unchanged unless the user
configured an alias for the abbreviation. `expand_ref` keeps a sequence-based
signature so an abbreviation strategy (e.g. issue number -> branch name) can be
plugged in later without touching the callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from core.errors import MissingArgumentError

logger = logging.getLogger(__name__)


def resolve_repo(abbr: str, aliases: Mapping[str, str] | None = None) -> str:
    """Map a repository abbreviation to its base URL (identity by default)."""

    if aliases and abbr in aliases:
        resolved = aliases[abbr].rstrip("/")
        logger.debug("repo alias %s -> %s", abbr, resolved)
        return resolved
    return abbr


def expand_ref(tokens: Sequence[str] | str) -> str:
    """Return the ref named by `tokens`.

    A bare string is returned as-is; for a sequence the ref is its first token
    (`path <ref> <path>` passes both tokens).
    """

    if isinstance(tokens, str):
        return tokens
    if not tokens:
        raise MissingArgumentError("ref")
    return tokens[0]


@dataclass(frozen=True)
class UrlResolver:
    """Resolved repository base URL plus ref expansion for one invocation."""

    repo_abbr: str
    aliases: Mapping[str, str] = field(default_factory=dict)

    @property
    def repo(self) -> str:
        return resolve_repo(self.repo_abbr, self.aliases)

    def expand_ref(self, tokens: Sequence[str] | str) -> str:
        return expand_ref(tokens)
