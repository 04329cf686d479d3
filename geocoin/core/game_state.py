"""Mutable authoritative game state, only mutated through the GameSession."""

from __future__ import annotations

from geocoin.config import GameConfig
from geocoin.core.cells import CellRegistry, GridCell, LatLng
from geocoin.core.directory import CacheDirectory
from geocoin.core.inventory import PlayerInventory


class GameState:
    """The single source of truth for one play session."""

    __slots__ = ("config", "cells", "directory", "inventory", "position")

    def __init__(self, config: GameConfig) -> None:
        self.config: GameConfig = config
        self.cells: CellRegistry = CellRegistry(config.tile_degrees)
        self.directory: CacheDirectory = CacheDirectory()
        self.inventory: PlayerInventory = PlayerInventory()
        self.position: LatLng = LatLng(config.start_lat, config.start_lng)

    @property
    def current_cell(self) -> GridCell:
        return self.cells.cell_for(self.position.lat, self.position.lng)

    def clear(self) -> None:
        """Forget all persisted cache state and held tokens.

        The cell registry and the player's position are kept.
        """
        self.directory.reset()
        self.inventory.clear()
