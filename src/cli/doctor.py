"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from adapters.browser import SystemOpener
from core.config import AppSettings, get_user_env_file, read_user_env_vars, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Configuration diagnostics and alias setup.")

_console = Console()

_ALIASES_KEY = "SITEJUMP_REPO_ALIASES"


@app.command()
def run() -> None:
    """Show the effective configuration and whether URLs can be opened."""

    settings = AppSettings()
    opener = SystemOpener(settings)

    table = Table(title="sitejump doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("APIdock URL", "OK", settings.apidock_url)
    table.add_row("Home URL", "OK", settings.home_url)
    table.add_row("Default branch", "OK", settings.default_branch)

    if settings.repo_aliases:
        aliases = ", ".join(f"{k} -> {v}" for k, v in sorted(settings.repo_aliases.items()))
        table.add_row("Repo aliases", "OK", aliases)
    else:
        table.add_row("Repo aliases", "OPTIONAL", "None set -> abbreviations are used verbatim")

    if settings.open_command:
        status = "OK" if opener.is_available() else "FAIL"
        table.add_row("Open command", status, settings.open_command)
    else:
        table.add_row("Open command", "OK", "system default browser")

    table.add_row("User config", "OK" if get_user_env_file().exists() else "MISSING", str(get_user_env_file()))

    _console.print(table)


@app.command(name="set-alias")
def set_alias(
    abbr: str = typer.Argument(..., help="Repository abbreviation, e.g. `df`."),
    url: str = typer.Argument(..., help="Repository base URL, e.g. https://github.com/eqdw/dotfiles."),
) -> None:
    """Store a repository alias in the user config .env."""

    if not abbr.strip() or not url.strip():
        raise typer.BadParameter("abbr and url are required")

    existing = read_user_env_vars().get(_ALIASES_KEY) or "{}"
    try:
        aliases = json.loads(existing)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"{_ALIASES_KEY} in {get_user_env_file()} is not valid JSON") from exc

    aliases[abbr.strip()] = url.strip().rstrip("/")
    env_path = write_user_env_vars({_ALIASES_KEY: json.dumps(aliases, sort_keys=True)})

    _console.print(f"[green]Saved alias[/green] {abbr} -> {aliases[abbr.strip()]} [dim]({env_path})[/dim]")
