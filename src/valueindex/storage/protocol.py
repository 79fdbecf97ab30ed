"""Index protocol for swappable backends.

The storage layer abstracts the bucket mapping, enabling:
- Local in-memory (default)
- Lock-guarded wrapper for multi-threaded hosts
- Remote/sharded (future)

Usage:
    index = LocalValueIndex()
    index.create(model, table, entity, partition)
    entities = index.query(model, table, partition)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Protocol, runtime_checkable

from valueindex.core.identity import IndexKey
from valueindex.core.types import EntityValue


@runtime_checkable
class ValueIndexStore(Protocol):
    """Abstract secondary value index. Implementations own the buckets."""

    def create(self, model: int, table: int, entity: EntityValue, partition: int) -> None:
        """Insert entity into the bucket, no-op if already present."""
        ...

    def query(self, model: int, table: int, partition: int) -> list[EntityValue]:
        """Copy of the bucket contents in bucket order. Empty if absent."""
        ...

    def exists(self, model: int, table: int, entity: EntityValue, partition: int = 0) -> bool:
        """Check whether entity is in the bucket."""
        ...

    def delete(self, model: int, table: int, entity: EntityValue, partition: int = 0) -> None:
        """Swap-remove entity from the bucket, no-op if absent."""
        ...

    def keys(self) -> Iterator[IndexKey]:
        """Iterate keys with an allocated bucket."""
        ...

    def __len__(self) -> int:
        """Number of allocated buckets."""
        ...

    def snapshot(self) -> dict[tuple[int, int, int], list[EntityValue]]:
        """Copy every bucket as plain lists keyed by (model, table, partition)."""
        ...

    def restore(self, data: Mapping[tuple[int, int, int], list[EntityValue]]) -> None:
        """Replace all state from a snapshot() mapping."""
        ...

    def clear(self) -> None:
        """Drop every bucket."""
        ...

    # Async variants for hosts driving storage from an event loop

    async def create_async(
        self, model: int, table: int, entity: EntityValue, partition: int
    ) -> None:
        """Insert entity (async variant)."""
        ...

    async def query_async(self, model: int, table: int, partition: int) -> list[EntityValue]:
        """Copy of the bucket contents (async variant)."""
        ...

    async def exists_async(
        self, model: int, table: int, entity: EntityValue, partition: int = 0
    ) -> bool:
        """Check membership (async variant)."""
        ...

    async def delete_async(
        self, model: int, table: int, entity: EntityValue, partition: int = 0
    ) -> None:
        """Swap-remove entity (async variant)."""
        ...
