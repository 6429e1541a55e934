"""CLI principal (Typer).

Por qué Typer:
- Un subcomando por sitio (`gh`, `apidock`, `web`) con ayuda generada.
- Los errores de uso se muestran con Rich y salen con código 2; los fallos del
  opener del sistema se propagan.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.browser import PrintOpener, SystemOpener
from adapters.sites import SITE_ADAPTERS
from cli import doctor
from cli.ui_components import build_routes_table, print_opened, print_usage_error
from core.config import AppSettings
from core.errors import UsageError
from core.interfaces.opener import UrlOpener
from core.services.dispatcher import Runner

app = typer.Typer(
    no_args_is_help=True,
    help="Open web pages from short commands (GitHub repos, APIdock docs, plain URLs).",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _build_opener(settings: AppSettings, print_only: bool) -> UrlOpener:
    if print_only:
        return PrintOpener(_console)
    return SystemOpener(settings)


def _dispatch(site: str, args: list[str] | None, *, print_only: bool) -> None:
    settings = AppSettings()
    adapter = SITE_ADAPTERS[site](settings)
    try:
        runner = Runner(adapter, args or [])
    except UsageError as exc:
        print_usage_error(_err_console, str(exc))
        raise typer.Exit(code=2) from exc

    command = runner.run(_build_opener(settings, print_only))
    if not print_only:
        print_opened(_console, command)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
) -> None:
    configure_logging(verbose)


@app.command(name="gh")
def gh(
    args: list[str] | None = typer.Argument(None, help="<repo> [action] [args...]"),
    print_only: bool = typer.Option(False, "--print", "-p", help="Print the URL instead of opening it."),
) -> None:
    """Open a GitHub page: repo, commits, pulls, refs, paths, files, diffs, history, blame."""

    _dispatch("gh", args, print_only=print_only)


@app.command(name="apidock")
def apidock(
    args: list[str] | None = typer.Argument(None, help="[rb|r|rs] [q] <term>"),
    print_only: bool = typer.Option(False, "--print", "-p", help="Print the URL instead of opening it."),
) -> None:
    """Open an APIdock lookup or search page (front page when no sub-site matches)."""

    _dispatch("apidock", args, print_only=print_only)


@app.command(name="web")
def web(
    args: list[str] | None = typer.Argument(None, help="[url]"),
    print_only: bool = typer.Option(False, "--print", "-p", help="Print the URL instead of opening it."),
) -> None:
    """Open a URL as-is (the configured home URL when none is given)."""

    _dispatch("web", args, print_only=print_only)


@app.command(name="routes")
def routes() -> None:
    """Show every dispatch token and the URL it produces."""

    settings = AppSettings()
    for name, adapter_cls in SITE_ADAPTERS.items():
        _console.print(build_routes_table(name, adapter_cls(settings)))


def run() -> None:
    app()
