"""GameSession: owns the game state and serializes every mutation.

Movement, transfers, position-feed samples and reset are discrete events that
run to completion. The API dispatches handlers on worker threads, so each
public mutation holds the session lock; in particular a move's teardown and
refresh can never interleave with another event.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from geocoin.core.cells import LatLng, parse_cell_key
from geocoin.core.enums import DIRECTION_OFFSETS, Direction, EventCategory
from geocoin.core.game_state import GameState
from geocoin.core.snapshot import CacheView, SessionSnapshot
from geocoin.core.tokens import Token
from geocoin.systems.rng import DeterministicRNG
from geocoin.systems.spawner import NeighborhoodSpawner
from geocoin.systems.transfer import TokenTransfer
from geocoin.utils.event_log import EventLog

if TYPE_CHECKING:
    from geocoin.config import GameConfig
    from geocoin.core.cache import Cache
    from geocoin.systems.spawner import CacheRenderer

logger = logging.getLogger(__name__)


class GameSession:
    """One player's session: position, inventory, and the cache grid around it.

    Provides:
      - movement (direction steps and absolute positions)
      - token transfers (collect / deposit and the take / give shortcuts)
      - a position-tracking subscription that can be started and stopped
      - reset of all persisted state
      - immutable snapshots for readers
    """

    def __init__(self, config: GameConfig, renderer: CacheRenderer | None = None) -> None:
        self._config = config
        self._lock = threading.RLock()
        self._rng = DeterministicRNG(config.world_seed)
        self._state = GameState(config)
        self._spawner = NeighborhoodSpawner(
            config, self._state.cells, self._state.directory, self._rng, renderer,
        )
        self._transfer = TokenTransfer(self._state.inventory, self._state.directory)
        self._event_log = EventLog(config.event_log_limit)
        self._tracking = False

        self._spawn_at(self._state.position)

    # -- public properties --

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def spawner(self) -> NeighborhoodSpawner:
        return self._spawner

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def tracking(self) -> bool:
        return self._tracking

    # -- movement --

    def move(self, direction: Direction) -> LatLng:
        """Step one tile in ``direction`` and rebuild the neighborhood."""
        d_lat, d_lng = DIRECTION_OFFSETS[direction]
        tile = self._config.tile_degrees
        with self._lock:
            target = self._state.position.offset(tile * d_lat, tile * d_lng)
            self._relocate(target, f"Moved {direction.name.lower()}")
            return target

    def move_to(self, lat: float, lng: float) -> LatLng:
        """Jump to an absolute coordinate and rebuild the neighborhood."""
        with self._lock:
            target = LatLng(lat, lng)
            self._relocate(target, "Moved")
            return target

    def _relocate(self, target: LatLng, verb: str) -> None:
        self._spawner.clear()
        self._state.position = target
        self._spawn_at(target)
        cell = self._state.current_cell
        logger.info("%s to (%.6f, %.6f), cell %s", verb, target.lat, target.lng, cell.key)
        self._event_log.record(EventCategory.MOVE, f"{verb} to cell {cell.key}")

    def _spawn_at(self, center: LatLng) -> None:
        caches = self._spawner.refresh(center)
        self._event_log.record(EventCategory.SPAWN, f"{len(caches)} caches nearby")

    # -- position tracking --

    def start_tracking(self) -> None:
        with self._lock:
            if self._tracking:
                return
            self._tracking = True
            logger.info("Position tracking started")
            self._event_log.record(EventCategory.TRACKING, "Position tracking started")

    def stop_tracking(self) -> None:
        with self._lock:
            if not self._tracking:
                return
            self._tracking = False
            logger.info("Position tracking stopped")
            self._event_log.record(EventCategory.TRACKING, "Position tracking stopped")

    def on_position(self, lat: float, lng: float) -> bool:
        """Deliver a position-feed sample. Ignored unless tracking is active."""
        with self._lock:
            if not self._tracking:
                return False
            self.move_to(lat, lng)
            return True

    # -- transfers --

    def get_cache(self, cell_key: str) -> Cache | None:
        return self._spawner.get(cell_key)

    def _canonical(self, token: Token) -> Token:
        """Re-home a parsed token onto the registry's instance of its cell."""
        cell = self._state.cells.get_cell(token.cell.i, token.cell.j)
        return token if token.cell is cell else Token(cell, token.serial)

    def collect(self, cell_key: str, token: Token) -> bool:
        with self._lock:
            token = self._canonical(token)
            cache = self._spawner.get(cell_key)
            if cache is None or not self._transfer.collect(token, cache):
                return False
            self._after_transfer(cache, EventCategory.COLLECT, token)
            return True

    def deposit(self, cell_key: str, token: Token) -> bool:
        with self._lock:
            token = self._canonical(token)
            cache = self._spawner.get(cell_key)
            if cache is None or not self._transfer.deposit(token, cache):
                return False
            self._after_transfer(cache, EventCategory.DEPOSIT, token)
            return True

    def take(self, cell_key: str) -> Token | None:
        """Collect the top token of a live cache."""
        with self._lock:
            cache = self._spawner.get(cell_key)
            if cache is None:
                return None
            token = self._transfer.take(cache)
            if token is not None:
                self._after_transfer(cache, EventCategory.COLLECT, token)
            return token

    def give(self, cell_key: str) -> Token | None:
        """Deposit the most recently acquired token into a live cache."""
        with self._lock:
            cache = self._spawner.get(cell_key)
            if cache is None:
                return None
            token = self._transfer.give(cache)
            if token is not None:
                self._after_transfer(cache, EventCategory.DEPOSIT, token)
            return token

    def _after_transfer(self, cache: Cache, category: EventCategory, token: Token) -> None:
        self._spawner.redraw(cache)
        verb = "Collected" if category is EventCategory.COLLECT else "Deposited"
        self._event_log.record(category, f"{verb} coin {token} at {cache.key}", (token.label,))

    # -- reset --

    def reset(self) -> None:
        """Erase all game state and regenerate the neighborhood at the current position.

        Live caches are discarded without capture so that nothing repopulates
        the directory.
        """
        with self._lock:
            self._spawner.discard()
            self._state.clear()
            self._spawn_at(self._state.position)
            logger.info("Game state reset")
            self._event_log.record(EventCategory.RESET, "Game state erased")

    # -- views --

    def cache_views(self) -> list[CacheView]:
        with self._lock:
            return [CacheView.of(c) for c in self._spawner.live.values()]

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            state = self._state
            return SessionSnapshot(
                position=state.position,
                center=state.current_cell,
                caches=tuple(CacheView.of(c) for c in self._spawner.live.values()),
                inventory=tuple(state.inventory.tokens),
                inventory_status=state.inventory.status,
                directory_size=len(state.directory),
                tracking=self._tracking,
            )

    def is_live(self, cell_key: str) -> bool:
        """Whether ``cell_key`` names a live cache. Raises ValueError if malformed."""
        parse_cell_key(cell_key)
        return self._spawner.get(cell_key) is not None
