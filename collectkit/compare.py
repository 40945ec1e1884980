"""Comparison helpers for integers and for object identity."""

from __future__ import annotations

from typing import Any

__all__ = ["int_equal", "int_compare", "pointer_equal", "pointer_compare"]


def int_equal(a: int, b: int) -> bool:
    """Return True if the two integers are equal."""
    return a == b


def int_compare(a: int, b: int) -> int:
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def pointer_equal(a: Any, b: Any) -> bool:
    """Return True if ``a`` and ``b`` are the very same object."""
    return a is b


def pointer_compare(a: Any, b: Any) -> int:
    """Order two objects by identity: -1, 0 or 1, and 0 only for the same object."""
    ida, idb = id(a), id(b)
    if ida < idb:
        return -1
    if ida > idb:
        return 1
    return 0