"""A balanced binary search tree (AVL tree) mapping keys to values."""

from __future__ import annotations

import enum
from typing import Any, Callable, Iterator, Optional

__all__ = ["Side", "AVLTreeNode", "AVLTree", "subtree_height"]


class Side(enum.IntEnum):
    """Which child of a node: left or right."""

    LEFT = 0
    RIGHT = 1


class AVLTreeNode:
    """A node of an :class:`AVLTree`, holding one key and its value."""

    __slots__ = ("children", "parent", "key", "value", "height")

    def __init__(self, key: Any, value: Any, parent: Optional[AVLTreeNode] = None) -> None:
        self.children: list[Optional[AVLTreeNode]] = [None, None]
        self.parent = parent
        self.key = key
        self.value = value
        self.height = 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, value={self.value!r})"

    def child(self, side: Side | int) -> Optional[AVLTreeNode]:
        """Return the child on ``side``, or None if there is none or the side is invalid."""
        if side in (Side.LEFT, Side.RIGHT):
            return self.children[side]
        return None

    @property
    def left(self) -> Optional[AVLTreeNode]:
        return self.children[Side.LEFT]

    @property
    def right(self) -> Optional[AVLTreeNode]:
        return self.children[Side.RIGHT]


def subtree_height(node: Optional[AVLTreeNode]) -> int:
    """Return the height of the subtree rooted at ``node`` (0 for None)."""
    return 0 if node is None else node.height


def _update_height(node: AVLTreeNode) -> None:
    node.height = max(subtree_height(node.children[Side.LEFT]),
                      subtree_height(node.children[Side.RIGHT])) + 1


def _parent_side(node: AVLTreeNode) -> Side:
    if node.parent.children[Side.LEFT] is node:
        return Side.LEFT
    return Side.RIGHT


class AVLTree:
    """An ordered mapping kept balanced under insertion and removal.

    Keys are ordered by a three-way ``compare`` function.  Equal keys may be
    inserted more than once; later ones go to the right of earlier ones.
    """

    def __init__(self, compare: Callable[[Any, Any], int]) -> None:
        self._compare = compare
        self._root: Optional[AVLTreeNode] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in order."""
        stack: list[AVLTreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.children[Side.LEFT]
            node = stack.pop()
            yield node.key
            node = node.children[Side.RIGHT]

    def _replace(self, old: AVLTreeNode, new: Optional[AVLTreeNode]) -> None:
        if new is not None:
            new.parent = old.parent
        if old.parent is None:
            self._root = new
        else:
            old.parent.children[_parent_side(old)] = new
            _update_height(old.parent)

    def _rotate(self, node: AVLTreeNode, direction: Side) -> AVLTreeNode:
        other = 1 - direction
        new_root = node.children[other]
        self._replace(node, new_root)

        node.children[other] = new_root.children[direction]
        new_root.children[direction] = node
        node.parent = new_root
        if node.children[other] is not None:
            node.children[other].parent = node

        _update_height(new_root)
        _update_height(node)
        return new_root

    def _balance(self, node: AVLTreeNode) -> AVLTreeNode:
        left = node.children[Side.LEFT]
        right = node.children[Side.RIGHT]
        diff = subtree_height(right) - subtree_height(left)

        if diff >= 2:
            if (subtree_height(right.children[Side.RIGHT])
                    < subtree_height(right.children[Side.LEFT])):
                self._rotate(right, Side.RIGHT)
            node = self._rotate(node, Side.LEFT)
        elif diff <= -2:
            if (subtree_height(left.children[Side.LEFT])
                    < subtree_height(left.children[Side.RIGHT])):
                self._rotate(left, Side.LEFT)
            node = self._rotate(node, Side.RIGHT)

        _update_height(node)
        return node

    def _balance_to_root(self, node: Optional[AVLTreeNode]) -> None:
        while node is not None:
            node = self._balance(node).parent

    def insert(self, key: Any, value: Any) -> AVLTreeNode:
        """Insert a key-value pair and return the new node."""
        parent: Optional[AVLTreeNode] = None
        side = Side.LEFT
        rover = self._root
        while rover is not None:
            parent = rover
            side = Side.LEFT if self._compare(key, rover.key) < 0 else Side.RIGHT
            rover = rover.children[side]

        node = AVLTreeNode(key, value, parent)
        if parent is None:
            self._root = node
        else:
            parent.children[side] = node

        self._balance_to_root(parent)
        self._count += 1
        return node

    def _take_replacement(self, node: AVLTreeNode) -> Optional[AVLTreeNode]:
        """Unlink and return the nearest node to ``node``, or None for a leaf."""
        left = node.children[Side.LEFT]
        right = node.children[Side.RIGHT]
        if left is None and right is None:
            return None

        side = Side.RIGHT if subtree_height(left) < subtree_height(right) else Side.LEFT
        inner = 1 - side

        result = node.children[side]
        while result.children[inner] is not None:
            result = result.children[inner]

        self._replace(result, result.children[side])
        _update_height(result.parent)
        return result

    def remove_node(self, node: AVLTreeNode) -> None:
        """Remove ``node`` from the tree."""
        swap = self._take_replacement(node)

        if swap is None:
            self._replace(node, None)
            start = node.parent
        else:
            start = swap if swap.parent is node else swap.parent
            for side in Side:
                swap.children[side] = node.children[side]
                if swap.children[side] is not None:
                    swap.children[side].parent = swap
            swap.height = node.height
            self._replace(node, swap)

        node.parent = None
        node.children = [None, None]
        self._count -= 1
        self._balance_to_root(start)

    def remove(self, key: Any) -> bool:
        """Remove an entry with ``key``; return False if there is none."""
        node = self.lookup_node(key)
        if node is None:
            return False
        self.remove_node(node)
        return True

    def lookup_node(self, key: Any) -> Optional[AVLTreeNode]:
        """Return the node holding ``key``, or None."""
        node = self._root
        while node is not None:
            diff = self._compare(key, node.key)
            if diff == 0:
                return node
            node = node.children[Side.LEFT if diff < 0 else Side.RIGHT]
        return None

    def lookup(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if it is absent."""
        node = self.lookup_node(key)
        return None if node is None else node.value

    def root_node(self) -> Optional[AVLTreeNode]:
        """Return the root node, or None for an empty tree."""
        return self._root

    def to_list(self) -> list[Any]:
        """Return all keys in order."""
        return list(self)