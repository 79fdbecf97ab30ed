"""Core primitives: keys, type aliases and errors.

Architecture Note:
    core/ holds stateless building blocks. The stateful index lives in
    storage/, its configuration in config/.
"""

from valueindex.core.errors import IndexInvariantError
from valueindex.core.identity import IndexKey
from valueindex.core.types import Bucket, EntityValue

__all__ = [
    # Types
    "Bucket",
    "EntityValue",
    # Identity
    "IndexKey",
    # Errors
    "IndexInvariantError",
]
