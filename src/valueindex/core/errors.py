"""Errors raised by the index."""


class IndexInvariantError(AssertionError):
    """A bucket violated an internal invariant (duplicate entry, desynced set).

    Signals a logic defect in the index itself, never bad caller input.
    Only raised when invariant checking is enabled.
    """
