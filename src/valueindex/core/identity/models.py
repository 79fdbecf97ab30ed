"""Index identity models.

Usage:
    key = IndexKey(model_id=0, table_id=69, partition_id=1)
    same = IndexKey.of(0, 69, 1)
"""

from __future__ import annotations

from dataclasses import dataclass


def check_identifier(name: str, value: object) -> int:
    """Validate a non-negative integer identifier.

    Args:
        name: Field name used in the error message.
        value: Candidate identifier.

    Returns:
        The identifier unchanged.

    Raises:
        TypeError: If value is not an int (bools are rejected).
        ValueError: If value is negative.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class IndexKey:
    """Composite bucket key: one partition of one table of one model.

    All three fields participate in equality and hashing.
    """

    model_id: int = 0
    table_id: int = 0
    partition_id: int = 0

    def __post_init__(self) -> None:
        check_identifier("model_id", self.model_id)
        check_identifier("table_id", self.table_id)
        check_identifier("partition_id", self.partition_id)

    @classmethod
    def of(cls, model: int, table: int, partition: int) -> IndexKey:
        """Build a key from positional identifiers."""
        return cls(model_id=model, table_id=table, partition_id=partition)

    def as_tuple(self) -> tuple[int, int, int]:
        """Plain (model, table, partition) tuple, as used in snapshots."""
        return (self.model_id, self.table_id, self.partition_id)
