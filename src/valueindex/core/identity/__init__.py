"""Index identity: composite keys addressing one bucket."""

from valueindex.core.identity.models import IndexKey

__all__ = [
    "IndexKey",
]
