"""Per-user serialization of cart mutations and order placement.

A ``SingleFlight`` hands out one lock per key. Holding the lock for a user id
around ``current_domain.process(...)`` covers the whole unit of work, commit
included, so two requests for the same user never interleave between reading
the cart and writing it back. Requests for different users do not contend.

Locks are owned per thread, so callers must hold them from worker threads;
coroutines sharing the event loop thread would re-enter each other's lock.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

logger = structlog.get_logger(__name__)


class SingleFlight:
    """Keyed re-entrant locks, released back to the pool when unused."""

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        self._locks: dict[str, threading.RLock] = {}
        self._holders: dict[str, int] = {}

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        key = str(key)
        with self._mutex:
            lock = self._locks.setdefault(key, threading.RLock())
            self._holders[key] = self._holders.get(key, 0) + 1

        if not lock.acquire(blocking=False):
            logger.debug("Waiting for in-flight request", key=key)
            lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._mutex:
                self._holders[key] -= 1
                if self._holders[key] == 0:
                    del self._holders[key]
                    del self._locks[key]

    def active_keys(self) -> set[str]:
        """Keys currently held or waited on."""
        with self._mutex:
            return set(self._locks)


# Shared by every route that reads-then-writes a user's cart.
cart_guard = SingleFlight()
