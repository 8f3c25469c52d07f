from __future__ import annotations

import logging

from ..storage.adapter import PersistentStoreAdapter
from .model import DomainState

logger = logging.getLogger(__name__)


class StateStore:
    """Owns the one in-memory DomainState and its persisted shadow copy.

    Loaded once at construction; every commit serializes the whole state
    before the in-memory snapshot is swapped, so a failed save leaves both
    sides as they were.
    """

    def __init__(self, adapter: PersistentStoreAdapter):
        self._adapter = adapter
        self._state = adapter.load()

    @property
    def state(self) -> DomainState:
        return self._state

    @property
    def adapter(self) -> PersistentStoreAdapter:
        return self._adapter

    def commit(self, new_state: DomainState, *, reason: str = "") -> None:
        self._adapter.save(new_state)
        self._state = new_state
        if reason:
            logger.info("state committed: %s", reason)
