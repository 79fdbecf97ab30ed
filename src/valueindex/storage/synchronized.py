"""Lock-guarded index wrapper for multi-threaded hosts.

The local index assumes run-to-completion callers. Hosts serving concurrent
callers wrap it here so that every operation runs under one global lock.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping

from valueindex.core.identity import IndexKey
from valueindex.core.types import EntityValue
from valueindex.storage.protocol import ValueIndexStore


class SynchronizedValueIndex:
    """Serialize all operations of an inner index behind a single RLock.

    Args:
        inner: Index to guard. Callers must not use it directly afterwards.
    """

    def __init__(self, inner: ValueIndexStore):
        self._inner = inner
        self._lock = threading.RLock()

    @property
    def inner(self) -> ValueIndexStore:
        """The wrapped index."""
        return self._inner

    def create(self, model: int, table: int, entity: EntityValue, partition: int) -> None:
        with self._lock:
            self._inner.create(model, table, entity, partition)

    def query(self, model: int, table: int, partition: int) -> list[EntityValue]:
        with self._lock:
            return self._inner.query(model, table, partition)

    def exists(self, model: int, table: int, entity: EntityValue, partition: int = 0) -> bool:
        with self._lock:
            return self._inner.exists(model, table, entity, partition)

    def delete(self, model: int, table: int, entity: EntityValue, partition: int = 0) -> None:
        with self._lock:
            self._inner.delete(model, table, entity, partition)

    def keys(self) -> Iterator[IndexKey]:
        """Iterate a point-in-time copy of the allocated keys."""
        with self._lock:
            keys = list(self._inner.keys())
        yield from keys

    def __len__(self) -> int:
        with self._lock:
            return len(self._inner)

    def snapshot(self) -> dict[tuple[int, int, int], list[EntityValue]]:
        with self._lock:
            return self._inner.snapshot()

    def restore(self, data: Mapping[tuple[int, int, int], list[EntityValue]]) -> None:
        with self._lock:
            self._inner.restore(data)

    def clear(self) -> None:
        with self._lock:
            self._inner.clear()

    # Operations never suspend, so the async variants take the same lock
    # without yielding to the loop while holding it.

    async def create_async(
        self, model: int, table: int, entity: EntityValue, partition: int
    ) -> None:
        self.create(model, table, entity, partition)

    async def query_async(self, model: int, table: int, partition: int) -> list[EntityValue]:
        return self.query(model, table, partition)

    async def exists_async(
        self, model: int, table: int, entity: EntityValue, partition: int = 0
    ) -> bool:
        return self.exists(model, table, entity, partition)

    async def delete_async(
        self, model: int, table: int, entity: EntityValue, partition: int = 0
    ) -> None:
        self.delete(model, table, entity, partition)
