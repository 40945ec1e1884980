"""A binomial heap ordered by a three-way comparison function."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from collectkit.binary_heap import HeapType

__all__ = ["HeapType", "BinomialHeap"]


@dataclass(frozen=True)
class _BinomialTree:
    value: Any
    subtrees: tuple[_BinomialTree, ...] = field(default=())

    @property
    def order(self) -> int:
        return len(self.subtrees)


class BinomialHeap:
    """A priority queue stored as a forest of binomial trees."""

    def __init__(self, heap_type: HeapType, compare: Callable[[Any, Any], int]) -> None:
        self._heap_type = HeapType(heap_type)
        self._compare = compare
        self._roots: list[Optional[_BinomialTree]] = []
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._heap_type.name}, size={self._count})"

    def _cmp(self, a: Any, b: Any) -> int:
        result = self._compare(a, b)
        return result if self._heap_type is HeapType.MIN else -result

    def _link(self, tree1: _BinomialTree, tree2: _BinomialTree) -> _BinomialTree:
        if self._cmp(tree1.value, tree2.value) > 0:
            tree1, tree2 = tree2, tree1
        return _BinomialTree(tree1.value, tree1.subtrees + (tree2,))

    def _merge(self, other: list[Optional[_BinomialTree]]) -> None:
        """Merge the roots in ``other`` into this heap, like a ripple-carry adder."""
        roots = self._roots
        size = max(len(roots), len(other)) + 1
        new_roots: list[Optional[_BinomialTree]] = []
        carry: Optional[_BinomialTree] = None

        for i in range(size):
            vals = [
                tree
                for tree in (
                    roots[i] if i < len(roots) else None,
                    other[i] if i < len(other) else None,
                    carry,
                )
                if tree is not None
            ]
            new_roots.append(vals[-1] if len(vals) % 2 == 1 else None)
            carry = self._link(vals[0], vals[1]) if len(vals) >= 2 else None

        while new_roots and new_roots[-1] is None:
            new_roots.pop()
        self._roots = new_roots

    def insert(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._merge([_BinomialTree(value)])
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the first value.

        Raises IndexError if the heap is empty.
        """
        if self._count == 0:
            raise IndexError("pop from an empty heap")

        least_index: Optional[int] = None
        for i, tree in enumerate(self._roots):
            if tree is None:
                continue
            if least_index is None or self._cmp(
                tree.value, self._roots[least_index].value
            ) < 0:
                least_index = i

        least = self._roots[least_index]
        self._roots[least_index] = None
        self._merge(list(least.subtrees))
        self._count -= 1
        return least.value