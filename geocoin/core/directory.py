"""Cache directory: the most recent memento for every cell that held a cache."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from geocoin.core.cache import Cache
    from geocoin.core.memento import CacheMemento

logger = logging.getLogger(__name__)


class CacheDirectory:
    """Mapping from cell key to the latest captured CacheMemento.

    Last write wins. Entries are only removed by ``reset()``; there is no
    per-entry eviction, so the directory grows with the number of distinct
    cells visited in a session.
    """

    __slots__ = ("_mementos",)

    def __init__(self) -> None:
        self._mementos: dict[str, CacheMemento] = {}

    def capture(self, cache: Cache) -> CacheMemento:
        memento = cache.to_memento()
        self._mementos[cache.key] = memento
        return memento

    def restore(self, cell_key: str) -> CacheMemento | None:
        return self._mementos.get(cell_key)

    def reset(self) -> None:
        count = len(self._mementos)
        self._mementos.clear()
        logger.debug("Directory reset (%d mementos dropped)", count)

    def __len__(self) -> int:
        return len(self._mementos)

    def __contains__(self, cell_key: object) -> bool:
        return cell_key in self._mementos

    def __iter__(self) -> Iterator[str]:
        return iter(self._mementos)
