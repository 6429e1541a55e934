"""Openers de URLs.

Por qué un wrapper:
- Aísla el único efecto secundario (abrir el navegador) detrás de `UrlOpener`.
- Facilita testeo: la CLI puede recibir un opener que solo imprime o registra.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

import typer
from rich.console import Console

from core.config import AppSettings

logger = logging.getLogger(__name__)


class SystemOpener:
    """Abre la URL con el mecanismo del sistema operativo.

    - Sin `open_command`: `typer.launch` (navegador/handler por defecto).
    - Con `open_command` (p.ej. `open`, `xdg-open`): lanza ese programa y no espera.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    @property
    def open_command(self) -> str | None:
        return self._settings.open_command

    def is_available(self) -> bool:
        if self.open_command:
            return shutil.which(self.open_command) is not None
        return True

    def open(self, url: str) -> None:
        logger.info("opening %s", url)
        if self.open_command:
            subprocess.Popen([self.open_command, url])  # noqa: S603
            return
        exit_code = typer.launch(url)
        if exit_code != 0:
            raise OSError(f"could not open {url} (launcher exited with {exit_code})")


class PrintOpener:
    """No abre nada: escribe la URL en stdout (modo `--print`)."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def open(self, url: str) -> None:
        self._console.print(url, markup=False, highlight=False, soft_wrap=True)
