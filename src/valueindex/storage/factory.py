"""Build a configured index from IndexSettings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from valueindex.storage.local import LocalValueIndex
from valueindex.storage.protocol import ValueIndexStore
from valueindex.storage.synchronized import SynchronizedValueIndex

if TYPE_CHECKING:
    from valueindex.config import IndexSettings

logger = structlog.get_logger(__name__)


def create_index(settings: IndexSettings | None = None) -> ValueIndexStore:
    """Create an index according to settings.

    Args:
        settings: Index settings. Loaded from the environment when omitted,
            which requires the config extra.

    Returns:
        A LocalValueIndex, wrapped in SynchronizedValueIndex if thread_safe.
    """
    if settings is None:
        from valueindex.config import IndexSettings

        settings = IndexSettings()

    index: ValueIndexStore = LocalValueIndex(
        use_membership_set=settings.use_membership_set,
        check_invariants=settings.check_invariants,
    )
    if settings.thread_safe:
        index = SynchronizedValueIndex(index)
    logger.debug(
        "created value index",
        thread_safe=settings.thread_safe,
        use_membership_set=settings.use_membership_set,
        check_invariants=settings.check_invariants,
    )
    return index
