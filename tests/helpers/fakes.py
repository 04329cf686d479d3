"""Test doubles for the luck generator and the rendering hook."""

from __future__ import annotations

from geocoin.core.cells import CellBounds
from geocoin.core.snapshot import CacheView
from geocoin.systems.rng import DeterministicRNG
from geocoin.systems.spawner import CacheRenderer


class RecordingRNG(DeterministicRNG):
    """Real xxhash luck, but remembers every key it was asked about."""

    def __init__(self, seed: int = 0) -> None:
        super().__init__(seed)
        self.keys: list[str] = []

    def luck(self, key: str) -> float:
        self.keys.append(key)
        return super().luck(key)

    def spawn_keys(self) -> list[tuple[int, int]]:
        out = []
        for key in self.keys:
            parts = key.split(",")
            if len(parts) == 2:
                out.append((int(parts[0]), int(parts[1])))
        return out


class FixedLuckRNG(DeterministicRNG):
    """Every cell spawns; every fresh cache gets floor(size_luck * 100) tokens."""

    def __init__(self, spawn_luck: float = 0.0, size_luck: float = 0.035) -> None:
        super().__init__(0)
        self.spawn_luck = spawn_luck
        self.size_luck = size_luck

    def luck(self, key: str) -> float:
        return self.size_luck if key.endswith("initialValue") else self.spawn_luck


class RecordingRenderer(CacheRenderer):
    def __init__(self) -> None:
        self.drawn: list[CacheView] = []
        self.erased: list[str] = []

    def draw(self, view: CacheView, bounds: CellBounds) -> None:
        self.drawn.append(view)

    def erase(self, cell_key: str) -> None:
        self.erased.append(cell_key)
