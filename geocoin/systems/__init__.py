"""Game systems: deterministic luck, cache spawning, token transfer."""

from geocoin.systems.rng import DeterministicRNG
from geocoin.systems.spawner import CacheRenderer, NeighborhoodSpawner, NullRenderer
from geocoin.systems.transfer import TokenTransfer

__all__ = ["CacheRenderer", "DeterministicRNG", "NeighborhoodSpawner", "NullRenderer", "TokenTransfer"]
