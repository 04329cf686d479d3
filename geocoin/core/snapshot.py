"""Immutable views of the game state for renderers and API readers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from geocoin.core.cells import CellBounds, GridCell, LatLng
from geocoin.core.tokens import Token

if TYPE_CHECKING:
    from geocoin.core.cache import Cache


@dataclass(frozen=True, slots=True)
class CacheView:
    """What a renderer needs to draw one cache: cell, count, ordered tokens."""

    cell: GridCell
    bounds: CellBounds
    tokens: tuple[Token, ...]

    @property
    def key(self) -> str:
        return self.cell.key

    @property
    def count(self) -> int:
        return len(self.tokens)

    @classmethod
    def of(cls, cache: Cache) -> CacheView:
        return cls(cell=cache.position, bounds=cache.bounds, tokens=tuple(cache.tokens))


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only copy of the observable session state."""

    position: LatLng
    center: GridCell
    caches: tuple[CacheView, ...]
    inventory: tuple[Token, ...]
    inventory_status: str
    directory_size: int
    tracking: bool

    def cache(self, cell_key: str) -> CacheView | None:
        for view in self.caches:
            if view.key == cell_key:
                return view
        return None
