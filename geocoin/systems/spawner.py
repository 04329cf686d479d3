"""Neighborhood spawner: materializes live caches around the player.

On every change of the player's reference coordinate the session calls
``clear()`` followed by ``refresh(center)``. Teardown captures each live
cache's memento before discarding it, so a cache seen again later resumes
exactly where it was left instead of regenerating.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator

from geocoin.core.cache import Cache
from geocoin.core.cells import GridCell, LatLng
from geocoin.core.snapshot import CacheView
from geocoin.core.tokens import mint_tokens

if TYPE_CHECKING:
    from geocoin.config import GameConfig
    from geocoin.core.cells import CellBounds, CellRegistry
    from geocoin.core.directory import CacheDirectory
    from geocoin.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

INITIAL_VALUE_SUFFIX = "initialValue"


class CacheRenderer(ABC):
    """Hook for whatever draws caches (map layer, terminal, test recorder)."""

    @abstractmethod
    def draw(self, view: CacheView, bounds: CellBounds) -> None:
        """A cache became live, or its contents changed."""

    @abstractmethod
    def erase(self, cell_key: str) -> None:
        """A live cache was discarded."""


class NullRenderer(CacheRenderer):
    def draw(self, view: CacheView, bounds: CellBounds) -> None:
        pass

    def erase(self, cell_key: str) -> None:
        pass


class NeighborhoodSpawner:
    """Owns the live caches in the player's neighborhood, keyed by cell key."""

    __slots__ = ("_config", "_cells", "_directory", "_rng", "_renderer", "_live")

    def __init__(
        self,
        config: GameConfig,
        cells: CellRegistry,
        directory: CacheDirectory,
        rng: DeterministicRNG,
        renderer: CacheRenderer | None = None,
    ) -> None:
        self._config = config
        self._cells = cells
        self._directory = directory
        self._rng = rng
        self._renderer: CacheRenderer = renderer or NullRenderer()
        self._live: dict[str, Cache] = {}

    # -- generation --

    def should_spawn(self, i: int, j: int) -> bool:
        """Deterministic spawn decision for cell (i, j)."""
        return self._rng.next_bool(self._rng.key(i, j), self._config.cache_spawn_probability)

    def initial_token_count(self, i: int, j: int) -> int:
        """Deterministic initial size, drawn independently of the spawn decision."""
        luck = self._rng.luck(self._rng.key(i, j, INITIAL_VALUE_SUFFIX))
        return math.floor(luck * self._config.max_initial_tokens)

    def neighborhood(self, center: GridCell) -> Iterator[tuple[int, int]]:
        """Yield (i, j) for offsets in [-N, N) on both axes.

        The window is closed-open, so it reaches N cells south/west of the
        center but only N-1 north/east. Generated worlds depend on this shape.
        """
        n = self._config.neighborhood_size
        for di in range(-n, n):
            for dj in range(-n, n):
                yield center.i + di, center.j + dj

    # -- live caches --

    @property
    def live(self) -> dict[str, Cache]:
        return self._live

    def get(self, cell_key: str) -> Cache | None:
        return self._live.get(cell_key)

    def __len__(self) -> int:
        return len(self._live)

    def refresh(self, center: LatLng) -> list[Cache]:
        """Materialize every spawning cell in the neighborhood of ``center``."""
        center_cell = self._cells.cell_for(center.lat, center.lng)
        spawned: list[Cache] = []
        restored = 0
        for i, j in self.neighborhood(center_cell):
            if not self.should_spawn(i, j):
                continue
            cache, was_restored = self._spawn(i, j)
            restored += was_restored
            spawned.append(cache)
        logger.debug(
            "Refresh at %s: %d caches (%d restored, %d generated)",
            center_cell.key, len(spawned), restored, len(spawned) - restored,
        )
        return spawned

    def _spawn(self, i: int, j: int) -> tuple[Cache, bool]:
        cell = self._cells.get_cell(i, j)
        cache = Cache(cell, self._cells.bounds(cell))
        memento = self._directory.restore(cell.key)
        if memento is not None:
            cache.from_memento(memento, self._cells)
        else:
            cache.add_tokens(mint_tokens(cell, self.initial_token_count(i, j)))
        self._live[cell.key] = cache
        self._renderer.draw(CacheView.of(cache), cache.bounds)
        return cache, memento is not None

    def redraw(self, cache: Cache) -> None:
        """Tell the renderer a live cache's contents changed."""
        self._renderer.draw(CacheView.of(cache), cache.bounds)

    def clear(self) -> int:
        """Capture every live cache into the directory, then discard them all."""
        for cache in self._live.values():
            self._directory.capture(cache)
        return self.discard()

    def discard(self) -> int:
        """Drop all live caches without capturing their state."""
        count = len(self._live)
        for cell_key in self._live:
            self._renderer.erase(cell_key)
        self._live.clear()
        return count
