"""Contrato del opener de URLs (el único efecto secundario del sistema)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class UrlOpener(Protocol):
    def open(self, url: str) -> None:
        """Open `url`; failures propagate to the caller."""

        ...
