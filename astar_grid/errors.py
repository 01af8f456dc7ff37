from __future__ import annotations


class GridConfigError(ValueError):
    """Grid dimensions, endpoints, walls or search options are unusable."""


class SearchInvariantError(RuntimeError):
    """The search left the grid in a state it should never reach."""
