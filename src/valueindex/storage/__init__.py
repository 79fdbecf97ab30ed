"""Index backends."""

from valueindex.storage.factory import create_index
from valueindex.storage.local import LocalValueIndex
from valueindex.storage.protocol import ValueIndexStore
from valueindex.storage.synchronized import SynchronizedValueIndex

__all__ = [
    "ValueIndexStore",
    "LocalValueIndex",
    "SynchronizedValueIndex",
    "create_index",
]
