"""Configuration module using Pydantic Settings.

Provides typed configuration for the index with environment variable support.

Usage:
    from valueindex.config import IndexSettings

    settings = IndexSettings(thread_safe=True)
"""

from valueindex.config.settings import IndexSettings

__all__ = [
    "IndexSettings",
]
