"""Deterministic "luck" values using xxhash.

World generation must replay identically: the same cell always yields the
same spawn decision and the same initial token count, in every process.

Formula: luck(key) = (xxh64(key, seed=WorldSeed) >> 11) / 2**53
"""

from __future__ import annotations

import xxhash


class DeterministicRNG:
    """Stateless hash-to-float generator keyed by strings.

    Each call is a pure function of (seed, key), with no internal mutable
    state. Independent draws for the same cell use different key suffixes.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1
    _FLOAT_SCALE = 1.0 / (1 << 53)

    def __init__(self, seed: int = 0) -> None:
        self._seed = seed & self._MAX_UINT64

    @property
    def seed(self) -> int:
        return self._seed

    @staticmethod
    def key(*parts: object) -> str:
        """Join key parts with commas: ``key(3, -5, "initialValue")`` -> ``"3,-5,initialValue"``."""
        return ",".join(str(p) for p in parts)

    def luck(self, key: str) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        # top 53 bits keep the result strictly below 1.0 after float conversion
        h = xxhash.xxh64(key.encode("utf-8"), seed=self._seed).intdigest()
        return (h >> 11) * self._FLOAT_SCALE

    def next_bool(self, key: str, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.luck(key) < probability
