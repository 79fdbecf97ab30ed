"""valueindex: secondary value index for entity-component storage.

Answers "which entities have this value, within partition P of table T"
without scanning rows.

Usage:
    from valueindex import LocalValueIndex

    index = LocalValueIndex()
    index.create(0, 69, 420, 1)
    index.create(0, 69, 1337, 1)
    index.query(0, 69, 1)  # [420, 1337]
    index.delete(0, 69, 420, 1)
    index.query(0, 69, 1)  # [1337]
"""

__version__ = "0.1.0"

# Core primitives
from valueindex.core import (
    Bucket,
    EntityValue,
    IndexInvariantError,
    IndexKey,
)

# Storage
from valueindex.storage import (
    LocalValueIndex,
    SynchronizedValueIndex,
    ValueIndexStore,
    create_index,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Bucket",
    "EntityValue",
    "IndexKey",
    "IndexInvariantError",
    # Storage
    "ValueIndexStore",
    "LocalValueIndex",
    "SynchronizedValueIndex",
    "create_index",
]
