"""Core data models: cells, tokens, caches, mementos, and game state."""

from geocoin.core.enums import Direction, EventCategory
from geocoin.core.cells import CellBounds, CellRegistry, GridCell, LatLng, quantize
from geocoin.core.tokens import Token
from geocoin.core.memento import CacheMemento
from geocoin.core.cache import Cache
from geocoin.core.directory import CacheDirectory
from geocoin.core.inventory import PlayerInventory
from geocoin.core.game_state import GameState
from geocoin.core.snapshot import CacheView, SessionSnapshot

__all__ = [
    "Cache",
    "CacheDirectory",
    "CacheMemento",
    "CacheView",
    "CellBounds",
    "CellRegistry",
    "Direction",
    "EventCategory",
    "GameState",
    "GridCell",
    "LatLng",
    "PlayerInventory",
    "SessionSnapshot",
    "Token",
    "quantize",
]
