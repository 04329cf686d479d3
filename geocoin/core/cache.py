"""Live caches materialized at grid cells."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from geocoin.core.cells import CellBounds, GridCell
from geocoin.core.memento import CacheMemento, CellRecord, TokenRecord
from geocoin.core.tokens import Token

if TYPE_CHECKING:
    from geocoin.core.cells import CellRegistry


class Cache:
    """A cache at one cell holding an ordered stack of tokens.

    Tokens are kept in insertion order; ``top`` (the last inserted) is the
    one handed out first.
    """

    __slots__ = ("position", "bounds", "tokens")

    def __init__(self, position: GridCell, bounds: CellBounds) -> None:
        self.position: GridCell = position
        self.bounds: CellBounds = bounds
        self.tokens: list[Token] = []

    @property
    def key(self) -> str:
        return self.position.key

    @property
    def top(self) -> Token | None:
        return self.tokens[-1] if self.tokens else None

    def __len__(self) -> int:
        return len(self.tokens)

    def __contains__(self, token: object) -> bool:
        return token in self.tokens

    def __repr__(self) -> str:
        return f"Cache({self.position.key}, tokens={len(self.tokens)})"

    # -- mutation --

    def add_token(self, token: Token) -> None:
        self.tokens.append(token)

    def add_tokens(self, tokens: Iterable[Token]) -> None:
        self.tokens.extend(tokens)

    def remove_token(self, token: Token) -> bool:
        """Remove ``token`` by value. Returns whether it was present."""
        if token in self.tokens:
            self.tokens.remove(token)
            return True
        return False

    # -- memento --

    def to_memento(self) -> CacheMemento:
        return CacheMemento(
            position=CellRecord.from_cell(self.position),
            tokens=tuple(TokenRecord.from_token(t) for t in self.tokens),
        )

    def from_memento(self, memento: CacheMemento, cells: CellRegistry | None = None) -> None:
        """Replace position and tokens with the memento's contents.

        When ``cells`` is given, restored positions are the registry's
        canonical instances.
        """
        self.position = memento.position.to_cell(cells)
        self.tokens = [record.to_token(cells) for record in memento.tokens]
