"""An automatically resizing array of values."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

__all__ = ["ArrayList"]


class ArrayList:
    """A growable sequence with positional insert, removal, search and sort."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._data: list[Any] = list(iterable)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` before position ``index`` (0 to len inclusive).

        Raises IndexError if the index is outside that range.
        """
        if not 0 <= index <= len(self._data):
            raise IndexError(f"insert index {index} out of range")
        self._data.insert(index, value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        self._data.append(value)

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the start."""
        self._data.insert(0, value)

    def remove(self, index: int) -> None:
        """Remove the entry at ``index``; an invalid index is ignored."""
        self.remove_range(index, 1)

    def remove_range(self, index: int, length: int) -> None:
        """Remove ``length`` entries starting at ``index``.

        A range that does not lie wholly inside the list is ignored.
        """
        if index < 0 or length < 0 or index + length > len(self._data):
            return
        del self._data[index:index + length]

    def index_of(self, equal: Callable[[Any, Any], Any], value: Any) -> int:
        """Return the first position whose entry ``equal`` matches, or -1."""
        for position, item in enumerate(self._data):
            if equal(item, value):
                return position
        return -1

    def clear(self) -> None:
        """Remove every entry."""
        self._data.clear()

    def sort(self, compare: Callable[[Any, Any], int]) -> None:
        """Sort in place with a three-way ``compare`` function (quicksort)."""
        data = self._data
        pending = [(0, len(data))]
        while pending:
            start, length = pending.pop()
            if length <= 1:
                continue
            end = start + length - 1
            pivot = data[end]
            boundary = start
            for i in range(start, end):
                if compare(data[i], pivot) < 0:
                    data[i], data[boundary] = data[boundary], data[i]
                    boundary += 1
            data[end] = data[boundary]
            data[boundary] = pivot
            pending.append((boundary + 1, end - boundary))
            pending.append((start, boundary - start))