"""Local in-memory value index.

Dict-of-lists storage suitable for single-process use and testing.

Usage:
    index = LocalValueIndex()
    index.create(0, 69, 420, 1)
    index.query(0, 69, 1)  # [420]
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

import structlog

from valueindex.core.errors import IndexInvariantError
from valueindex.core.identity import IndexKey
from valueindex.core.identity.models import check_identifier
from valueindex.core.types import Bucket, EntityValue

logger = structlog.get_logger(__name__)


class LocalValueIndex:
    """Secondary value index using a dict of ordered buckets.

    Structure:
        _buckets[IndexKey(model, table, partition)] = [entity, ...]
        _members[IndexKey(model, table, partition)] = {entity, ...}

    Buckets are allocated on first create and stay allocated (possibly empty)
    after their last entity is deleted. Deletion is swap-remove, so bucket
    order is insertion order only until the first deletion.

    Not thread-safe. Wrap in SynchronizedValueIndex for concurrent callers.

    Args:
        use_membership_set: Keep a per-bucket set for O(1) membership checks
            (default True). When False, membership is a linear bucket scan.
        check_invariants: Verify a bucket after every mutation and raise
            IndexInvariantError on corruption (default False).
    """

    def __init__(self, use_membership_set: bool = True, check_invariants: bool = False):
        """Initialize an empty index.

        Args:
            use_membership_set: Maintain auxiliary per-bucket sets.
            check_invariants: Verify buckets after each mutation.
        """
        self._use_membership_set = use_membership_set
        self._check_invariants = check_invariants
        self._buckets: dict[IndexKey, Bucket] = {}
        self._members: dict[IndexKey, set[EntityValue]] = {}

    def _allocate(self, key: IndexKey) -> Bucket:
        """Get the bucket for key, allocating it on first use."""
        bucket = self._buckets.get(key)
        if bucket is None:
            bucket = self._buckets[key] = []
            if self._use_membership_set:
                self._members[key] = set()
            logger.debug(
                "allocated bucket",
                model=key.model_id,
                table=key.table_id,
                partition=key.partition_id,
            )
        return bucket

    def _contains(self, key: IndexKey, entity: EntityValue) -> bool:
        """Membership check against one bucket. Absent bucket means absent entity."""
        bucket = self._buckets.get(key)
        if bucket is None:
            return False
        if self._use_membership_set:
            return entity in self._members[key]
        return any(value == entity for value in bucket)

    def _verify(self, key: IndexKey) -> None:
        """Raise IndexInvariantError if the bucket for key is corrupt."""
        bucket = self._buckets.get(key, [])
        unique = set(bucket)
        if len(unique) != len(bucket):
            raise IndexInvariantError(f"duplicate entity in bucket {key}: {bucket}")
        if self._use_membership_set and self._members.get(key, set()) != unique:
            raise IndexInvariantError(f"membership set out of sync for bucket {key}")

    def create(self, model: int, table: int, entity: EntityValue, partition: int) -> None:
        """Insert entity at the end of its bucket.

        Idempotent: an entity already anywhere in the bucket is left alone.

        Args:
            model: Model identifier.
            table: Table identifier within the model.
            entity: Entity identifier to index.
            partition: Partition identifier within the table.

        Raises:
            TypeError: If an identifier is not an int.
            ValueError: If an identifier is negative.
        """
        key = IndexKey.of(model, table, partition)
        check_identifier("entity", entity)
        bucket = self._allocate(key)
        if self._contains(key, entity):
            return
        bucket.append(entity)
        if self._use_membership_set:
            self._members[key].add(entity)
        if self._check_invariants:
            self._verify(key)

    def query(self, model: int, table: int, partition: int) -> list[EntityValue]:
        """Return a copy of the bucket contents.

        Args:
            model: Model identifier.
            table: Table identifier within the model.
            partition: Partition identifier within the table.

        Returns:
            Entities in bucket order; empty list if the bucket was never created.
        """
        bucket = self._buckets.get(IndexKey.of(model, table, partition))
        if bucket is None:
            return []
        return list(bucket)

    def exists(self, model: int, table: int, entity: EntityValue, partition: int = 0) -> bool:
        """Check whether entity is indexed in the given partition.

        Args:
            model: Model identifier.
            table: Table identifier within the model.
            entity: Entity identifier to look for.
            partition: Partition the entity was created under (default 0).

        Returns:
            True if present, False otherwise.
        """
        return self._contains(IndexKey.of(model, table, partition), entity)

    def delete(self, model: int, table: int, entity: EntityValue, partition: int = 0) -> None:
        """Remove entity from its bucket by swap-remove.

        The bucket's last entity is moved into the vacated slot. Missing
        buckets and missing entities are silently ignored.

        Args:
            model: Model identifier.
            table: Table identifier within the model.
            entity: Entity identifier to remove.
            partition: Partition the entity was created under (default 0).
        """
        key = IndexKey.of(model, table, partition)
        if not self._contains(key, entity):
            return
        bucket = self._buckets[key]
        position = next(i for i, value in enumerate(bucket) if value == entity)
        last = bucket.pop()
        if position < len(bucket):
            bucket[position] = last
            logger.debug("swap-removed entity", key=key.as_tuple(), removed=entity, moved=last)
        if self._use_membership_set:
            self._members[key].discard(entity)
        if self._check_invariants:
            self._verify(key)

    def keys(self) -> Iterator[IndexKey]:
        """Iterate keys that have an allocated bucket, including empty ones.

        Yields:
            IndexKey for each allocated bucket, in allocation order.
        """
        yield from list(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def snapshot(self) -> dict[tuple[int, int, int], list[EntityValue]]:
        """Copy all buckets as plain lists keyed by (model, table, partition).

        Returns:
            Independent mapping; mutating it does not affect the index.
        """
        logger.debug("snapshot", buckets=len(self._buckets))
        return {key.as_tuple(): list(bucket) for key, bucket in self._buckets.items()}

    def restore(self, data: Mapping[tuple[int, int, int], list[EntityValue]]) -> None:
        """Replace all state from a snapshot() mapping.

        State is swapped only after the whole mapping validated, so a failed
        restore leaves the index untouched.

        Args:
            data: Mapping of (model, table, partition) to entity lists.

        Raises:
            ValueError: If a key is malformed or a bucket holds a duplicate.
            TypeError: If an identifier is not an int.
        """
        buckets: dict[IndexKey, Bucket] = {}
        members: dict[IndexKey, set[EntityValue]] = {}
        for raw_key, entities in data.items():
            if len(raw_key) != 3:
                raise ValueError(f"Snapshot key must be (model, table, partition), got {raw_key}")
            key = IndexKey.of(*raw_key)
            bucket = [check_identifier("entity", entity) for entity in entities]
            unique = set(bucket)
            if len(unique) != len(bucket):
                raise ValueError(f"Snapshot bucket {raw_key} contains duplicate entities")
            buckets[key] = bucket
            if self._use_membership_set:
                members[key] = unique
        self._buckets = buckets
        self._members = members
        logger.debug("restored", buckets=len(buckets))

    def clear(self) -> None:
        """Drop every bucket."""
        self._buckets.clear()
        self._members.clear()

    # Async variants - for LocalValueIndex these just wrap sync methods

    async def create_async(
        self, model: int, table: int, entity: EntityValue, partition: int
    ) -> None:
        """Insert entity (async wrapper for sync implementation)."""
        self.create(model, table, entity, partition)

    async def query_async(self, model: int, table: int, partition: int) -> list[EntityValue]:
        """Copy of the bucket contents (async wrapper)."""
        return self.query(model, table, partition)

    async def exists_async(
        self, model: int, table: int, entity: EntityValue, partition: int = 0
    ) -> bool:
        """Check membership (async wrapper)."""
        return self.exists(model, table, entity, partition)

    async def delete_async(
        self, model: int, table: int, entity: EntityValue, partition: int = 0
    ) -> None:
        """Swap-remove entity (async wrapper)."""
        self.delete(model, table, entity, partition)
