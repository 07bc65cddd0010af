"""Shared utilities for tzcompanion modules."""

from __future__ import annotations


def chunked(items: list[str], size: int) -> list[list[str]]:
    """Split a list into consecutive pages of at most ``size`` items."""
    if size < 1:
        raise ValueError("size must be positive")
    return [items[i : i + size] for i in range(0, len(items), size)]
