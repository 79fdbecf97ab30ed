"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the index.

Usage:
    from valueindex.config import IndexSettings

    # Load from environment variables (VALUEINDEX_*)
    settings = IndexSettings()

    # Or override with explicit values
    settings = IndexSettings(thread_safe=True)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install valueindex[config]"
    ) from e


class IndexSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for value index construction.

    Attributes:
        thread_safe: Guard the index with a global lock.
        use_membership_set: Keep a per-bucket set for membership checks.
        check_invariants: Verify buckets after every mutation (tests, debugging).

    Environment Variables:
        VALUEINDEX_THREAD_SAFE
        VALUEINDEX_USE_MEMBERSHIP_SET
        VALUEINDEX_CHECK_INVARIANTS
    """

    model_config = SettingsConfigDict(
        env_prefix="VALUEINDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    thread_safe: bool = False
    use_membership_set: bool = True
    check_invariants: bool = False
