"""Adaptador de sitio: GitHub (source hosting).

Fase 1:
- Traduce `gh <repo> [acción] [args...]` en URLs de github.com.
- La abreviatura del repo se resuelve con `UrlResolver` (identidad salvo alias).

Soportado:
    <null>         -> abrir el repo
    <hash>         -> abrir un commit concreto
    c(ommit(s))    -> lista de commits, o un commit
    p(ull(s))      -> lista de pulls, pulls de un autor, o una pull concreta
    r(ef)          -> abrir una ref
    pa(th)         -> abrir un directorio (alias: `... history`)
    f(ile)         -> abrir un fichero (alias: `... history`, `... blame`)
    d(iff) | pr    -> comparar dos refs
    h(istory)      -> historial de un path
    b(lame)        -> blame de un fichero
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from core.config import AppSettings
from core.domain.arguments import Arguments
from core.domain.models import GitHubAction, WebCommand
from core.errors import ArgumentCountError, MissingArgumentError
from core.services.url_resolver import UrlResolver

logger = logging.getLogger(__name__)

_HISTORY_ALIASES = GitHubAction.HISTORY.tokens
_BLAME_ALIASES = GitHubAction.BLAME.tokens
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def is_pull_number(token: str) -> bool:
    """True when the token's leading integer is non-zero.

    Non-numeric text parses as 0, so `"0"` and author names both count as
    non-numeric.
    """

    match = _LEADING_INT.match(token)
    return bool(match) and int(match.group(1)) != 0


class GitHubAdapter:
    """Genera URLs de repositorios a partir de tokens."""

    name = "github"

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()
        self._builders: dict[GitHubAction, Callable[[UrlResolver, Arguments], str]] = {
            GitHubAction.OPEN_REPO: self._open_repo,
            GitHubAction.COMMIT: self._commit,
            GitHubAction.PULL: self._pull,
            GitHubAction.REF: self._ref,
            GitHubAction.PATH: self._path,
            GitHubAction.FILE: self._file,
            GitHubAction.DIFF: self._diff,
            GitHubAction.HISTORY: self._history,
            GitHubAction.BLAME: self._blame,
        }

    @property
    def default_branch(self) -> str:
        return self._settings.default_branch

    def generate_command(self, args: Arguments) -> WebCommand:
        repo_abbr, args = args.advance()
        if not repo_abbr:
            raise MissingArgumentError("repo")
        resolver = UrlResolver(repo_abbr, self._settings.repo_aliases)

        if not args:
            action = GitHubAction.OPEN_REPO
        else:
            token, args = args.advance()
            action = GitHubAction.from_token(token)
            if action is None:
                # `gh <repo> <hash>`
                logger.debug("unknown token %r, treating it as a commit", token)
                if args:
                    raise ArgumentCountError("commit", len(args) + 1, "1")
                action = GitHubAction.COMMIT
                args = Arguments.of([token])

        return WebCommand(
            url=self.generate_url(action, resolver, args),
            site=self.name,
            action=action.value,
        )

    def generate_url(self, action: GitHubAction, resolver: UrlResolver, args: Arguments) -> str:
        return self._builders[action](resolver, args)

    def describe_routes(self) -> list[tuple[str, str]]:
        return [
            ("", "<repo>"),
            ("c|commit|commits [hash]", "<repo>/commits | <repo>/commit/<hash>"),
            ("p|pull|pulls [n|author]", "<repo>/pulls | <repo>/pull/<n> | <repo>/pulls/<author>"),
            ("r|ref <ref>", "<repo>/tree/<ref>"),
            ("pa|path [ref] <path> [h]", "<repo>/tree/<ref>/<path>"),
            ("f|file [ref] <path> [h|b]", "<repo>/blob/<ref>/<path>"),
            ("d|diff|pr <ref> [end]", "<repo>/compare/<ref> | <repo>/compare/<start>...<end>"),
            ("h|history [ref] <path>", "<repo>/commits/<ref>/<path>"),
            ("b|blame [ref] <path>", "<repo>/blame/<ref>/<path>"),
            ("<hash>", "<repo>/commit/<hash>"),
        ]

    # --- builders -------------------------------------------------------

    def _open_repo(self, resolver: UrlResolver, args: Arguments) -> str:
        return resolver.repo

    def _commit(self, resolver: UrlResolver, args: Arguments) -> str:
        if len(args) == 0:
            return f"{resolver.repo}/commits"
        if len(args) == 1:
            return f"{resolver.repo}/commit/{args.peek()}"
        raise ArgumentCountError("commit", len(args), "0 or 1")

    def _pull(self, resolver: UrlResolver, args: Arguments) -> str:
        if len(args) == 0:
            return f"{resolver.repo}/pulls"
        if len(args) == 1:
            token = args.peek()
            if is_pull_number(token):
                return f"{resolver.repo}/pull/{token}"
            return f"{resolver.repo}/pulls/{token}"
        raise ArgumentCountError("pull", len(args), "0 or 1")

    def _ref(self, resolver: UrlResolver, args: Arguments) -> str:
        if len(args) > 1:
            raise ArgumentCountError("ref", len(args), "1")
        return f"{resolver.repo}/tree/{resolver.expand_ref(args.remaining)}"

    def _path(self, resolver: UrlResolver, args: Arguments) -> str:
        if args.last in _HISTORY_ALIASES:
            return self._history(resolver, args.without_last())
        ref, path = self._ref_and_path("path", resolver, args)
        return f"{resolver.repo}/tree/{ref}/{path}"

    def _file(self, resolver: UrlResolver, args: Arguments) -> str:
        if args.last in _HISTORY_ALIASES:
            return self._history(resolver, args.without_last())
        if args.last in _BLAME_ALIASES:
            return self._blame(resolver, args.without_last())
        ref, path = self._ref_and_path("file", resolver, args)
        return f"{resolver.repo}/blob/{ref}/{path}"

    def _diff(self, resolver: UrlResolver, args: Arguments) -> str:
        if len(args) == 1:
            return f"{resolver.repo}/compare/{resolver.expand_ref(args.peek())}"
        if len(args) == 2:
            start, end = args.remaining
            return f"{resolver.repo}/compare/{start}...{end}"
        raise ArgumentCountError("diff", len(args), "1 or 2")

    def _history(self, resolver: UrlResolver, args: Arguments) -> str:
        ref, path = self._ref_and_path("history", resolver, args)
        return f"{resolver.repo}/commits/{ref}/{path}"

    def _blame(self, resolver: UrlResolver, args: Arguments) -> str:
        ref, path = self._ref_and_path("blame", resolver, args)
        return f"{resolver.repo}/blame/{ref}/{path}"

    def _ref_and_path(self, command: str, resolver: UrlResolver, args: Arguments) -> tuple[str, str]:
        """`<path>` uses the default branch; `<ref> <path>` expands the ref."""

        if len(args) == 1:
            return self.default_branch, args.last
        if len(args) == 2:
            return resolver.expand_ref(args.remaining), args.last
        raise ArgumentCountError(command, len(args), "1 or 2")
