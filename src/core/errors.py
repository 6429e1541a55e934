"""Jerarquía de errores de sitejump.

Por qué una jerarquía propia:
- La CLI captura `UsageError` en un único punto y lo muestra como error de uso.
- Cualquier otra excepción (p.ej. fallo del opener del sistema) se propaga.
"""

from __future__ import annotations


class SiteJumpError(Exception):
    """Base class for all sitejump errors."""


class UsageError(SiteJumpError):
    """The command line cannot be turned into a URL."""


class MissingArgumentError(UsageError):
    """A required positional argument was not supplied."""

    def __init__(self, name: str) -> None:
        super().__init__(f"missing required argument: {name}")
        self.name = name


class ArgumentCountError(UsageError):
    """A command received a number of arguments it does not accept."""

    def __init__(self, command: str, got: int, expected: str) -> None:
        super().__init__(f"'{command}' takes {expected} argument(s), got {got}")
        self.command = command
        self.got = got
        self.expected = expected
