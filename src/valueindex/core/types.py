"""Core type definitions for valueindex."""

from typing import TypeAlias

EntityValue: TypeAlias = int
"""Opaque non-negative entity identifier handed over by the primary key store."""

Bucket: TypeAlias = list[EntityValue]
"""Ordered, duplicate-free entity identifiers stored under one IndexKey."""
