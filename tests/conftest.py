"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from valueindex import LocalValueIndex


@pytest.fixture(params=[True, False], ids=["membership-set", "linear-scan"])
def index(request):
    """Fresh LocalValueIndex with invariant checking, in both membership modes."""
    return LocalValueIndex(use_membership_set=request.param, check_invariants=True)


@pytest.fixture
def filled(index):
    """Index holding bucket [10, 20, 30] under (1, 2, partition 0)."""
    for entity in (10, 20, 30):
        index.create(1, 2, entity, 0)
    return index
