"""Moving tokens between the player inventory and caches."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geocoin.core.cache import Cache
    from geocoin.core.directory import CacheDirectory
    from geocoin.core.inventory import PlayerInventory
    from geocoin.core.tokens import Token

logger = logging.getLogger(__name__)


class TokenTransfer:
    """Collect/deposit with immediate memento write-back.

    Both operations are no-ops when the token is not where it should be, so
    repeating a transfer after it succeeded changes nothing.
    """

    __slots__ = ("_inventory", "_directory")

    def __init__(self, inventory: PlayerInventory, directory: CacheDirectory) -> None:
        self._inventory = inventory
        self._directory = directory

    def collect(self, token: Token, cache: Cache) -> bool:
        """Move ``token`` from ``cache`` into the inventory."""
        if not cache.remove_token(token):
            return False
        self._inventory.add_token(token)
        self._directory.capture(cache)
        logger.info("Collected coin: %s from %s", token, cache.key)
        return True

    def deposit(self, token: Token, cache: Cache) -> bool:
        """Move ``token`` from the inventory into ``cache``."""
        if not self._inventory.remove_token(token):
            return False
        cache.add_token(token)
        self._directory.capture(cache)
        logger.info("Deposited coin: %s into %s", token, cache.key)
        return True

    def take(self, cache: Cache) -> Token | None:
        """Collect the cache's top token, if any."""
        token = cache.top
        if token is not None and self.collect(token, cache):
            return token
        return None

    def give(self, cache: Cache) -> Token | None:
        """Deposit the most recently acquired inventory token, if any."""
        token = self._inventory.latest
        if token is not None and self.deposit(token, cache):
            return token
        return None
