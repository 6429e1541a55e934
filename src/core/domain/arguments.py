"""Cursor inmutable sobre los argumentos de la línea de comandos.

Por qué un cursor en vez de `list.pop(0)`:
- Los comandos delegan unos en otros (path/file -> history/blame); con una
  lista compartida cualquier consumo afectaría al llamador.
- Avanzar devuelve un nuevo `Arguments`, el original queda intacto.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Arguments:
    """Ordered CLI tokens plus the index of the next unconsumed one."""

    tokens: tuple[str, ...] = ()
    position: int = 0

    @classmethod
    def of(cls, tokens: Iterable[str] | str | None = None) -> "Arguments":
        if isinstance(tokens, str):
            return cls(tokens=(tokens,))
        return cls(tokens=tuple(tokens or ()))

    @property
    def remaining(self) -> tuple[str, ...]:
        return self.tokens[self.position :]

    def __len__(self) -> int:
        return len(self.remaining)

    def __iter__(self) -> Iterator[str]:
        return iter(self.remaining)

    def __bool__(self) -> bool:
        return self.position < len(self.tokens)

    def peek(self) -> str | None:
        """Return the next token without consuming it."""

        if not self:
            return None
        return self.tokens[self.position]

    @property
    def last(self) -> str | None:
        if not self:
            return None
        return self.tokens[-1]

    def advance(self) -> tuple[str | None, "Arguments"]:
        """Consume the front token; returns it with the advanced cursor."""

        token = self.peek()
        if token is None:
            return None, self
        return token, Arguments(tokens=self.tokens, position=self.position + 1)

    def without_last(self) -> "Arguments":
        if not self:
            return self
        return Arguments(tokens=self.tokens[:-1], position=self.position)
