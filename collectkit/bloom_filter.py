"""A space-efficient probabilistic set membership filter."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["BloomFilter", "MAX_FUNCTIONS"]

# Salts XORed with the value's hash to derive several independent hashes.
# Taken from the opening digits of a well-known table of random numbers.
_SALTS: tuple[int, ...] = (
    0x1953C322, 0x588CCF17, 0x64BF600C, 0xA6BE3F3D,
    0x341A02EA, 0x15B03217, 0x3B062858, 0x5956FD06,
    0x18B5624F, 0xE3BE0B46, 0x20FFCD5C, 0xA35DFD2B,
    0x1FC4A9BF, 0x57C45D5C, 0xA8661C4A, 0x4F1B74D2,
    0x5A6DDE13, 0x3B18DAC6, 0x05A8AFBF, 0xBBDA2FE2,
    0xA2520D78, 0xE7934849, 0xD541BC75, 0x09A55B57,
    0x9B345AE2, 0xFC2D26AF, 0x38679CEF, 0x81BD1E0D,
    0x654681AE, 0x4B3D87AD, 0xD5FF10FB, 0x23B32F67,
    0xAFC7E366, 0xDD955EAD, 0xE7C34B1C, 0xFEACE0A6,
    0xEB16F09D, 0x3C57A72D, 0x2C8294C5, 0xBA92662A,
    0xCD5B2D14, 0x743936C8, 0x2489BEFF, 0xC6C56E00,
    0x74A4F606, 0xB244A94A, 0x5EDFC423, 0xF1901934,
    0x24AF7691, 0xF6C98B25, 0xEA25AF46, 0x76D5F2E6,
    0x5E33CDF2, 0x445EB357, 0x88556BD2, 0x70D1DA7A,
    0x54449368, 0x381020BC, 0x1C0520BF, 0xF7E44942,
    0xA27E2A58, 0x66866FC5, 0x12519CE7, 0x437A8456,
)

MAX_FUNCTIONS = len(_SALTS)

_HASH_MASK = 0xFFFFFFFF


class BloomFilter:
    """A set that may report false positives but never false negatives.

    ``hash_func`` maps a value to an integer; it is reduced to 32 bits.
    ``num_functions`` is how many derived hashes set bits per value, at most
    :data:`MAX_FUNCTIONS`.
    """

    def __init__(self, table_size: int, hash_func: Callable[[Any], int],
                 num_functions: int) -> None:
        if num_functions < 0 or num_functions > MAX_FUNCTIONS:
            raise ValueError(
                f"num_functions must be between 0 and {MAX_FUNCTIONS}, got {num_functions}"
            )
        if table_size <= 0:
            raise ValueError(f"table_size must be positive, got {table_size}")
        self._table_size = table_size
        self._hash_func = hash_func
        self._num_functions = num_functions
        self._table = bytearray(self._byte_length)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(table_size={self._table_size}, "
                f"num_functions={self._num_functions})")

    def __contains__(self, value: Any) -> bool:
        return self.query(value)

    @property
    def table_size(self) -> int:
        return self._table_size

    @property
    def num_functions(self) -> int:
        return self._num_functions

    @property
    def _byte_length(self) -> int:
        return (self._table_size + 7) // 8

    def _indexes(self, value: Any):
        base = self._hash_func(value) & _HASH_MASK
        for salt in _SALTS[:self._num_functions]:
            yield (base ^ salt) % self._table_size

    def insert(self, value: Any) -> None:
        """Record ``value`` in the filter."""
        for index in self._indexes(value):
            self._table[index // 8] |= 1 << (index % 8)

    def query(self, value: Any) -> bool:
        """Return False if ``value`` was certainly never inserted, else True."""
        return all(
            self._table[index // 8] & (1 << (index % 8))
            for index in self._indexes(value)
        )

    def read(self) -> bytes:
        """Return the bit table packed into ``(table_size + 7) // 8`` bytes."""
        return bytes(self._table)

    def load(self, data: bytes) -> None:
        """Replace the bit table with ``data`` as produced by :meth:`read`.

        Raises ValueError if ``data`` is shorter than the table.
        """
        length = self._byte_length
        if len(data) < length:
            raise ValueError(f"need {length} bytes, got {len(data)}")
        self._table[:] = bytes(data[:length])

    def _check_compatible(self, other: BloomFilter) -> None:
        if (self._table_size != other._table_size
                or self._num_functions != other._num_functions
                or self._hash_func != other._hash_func):
            raise ValueError("bloom filters were created with different parameters")

    def _combine(self, other: BloomFilter, op: Callable[[int, int], int]) -> BloomFilter:
        self._check_compatible(other)
        result = BloomFilter(self._table_size, self._hash_func, self._num_functions)
        result._table[:] = bytes(op(a, b) for a, b in zip(self._table, other._table))
        return result

    def union(self, other: BloomFilter) -> BloomFilter:
        """Return a new filter holding values present in either filter.

        Raises ValueError if the filters were created with different parameters.
        """
        return self._combine(other, lambda a, b: a | b)

    def intersection(self, other: BloomFilter) -> BloomFilter:
        """Return a new filter holding only values present in both filters.

        Raises ValueError if the filters were created with different parameters.
        """
        return self._combine(other, lambda a, b: a & b)