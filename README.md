# collectkit

A small set of container data structures for Python. Each one takes plain
callables to compare, test equality or hash its values, so it works with any
kind of value.

## What is in the package

- `collectkit.arraylist.ArrayList`: a growable sequence. It supports
  `len()`, indexing and iteration, and has `insert`, `append`, `prepend`,
  `remove` (by position), `remove_range`, `index_of` (with an equality
  callable, returning -1 when nothing matches), `clear`, and `sort` (an
  in-place quicksort driven by a three-way compare callable).
  `insert` raises `IndexError` for a position outside `0..len`;
  `remove` and `remove_range` silently ignore a range that does not lie
  wholly inside the list.
- `collectkit.avl_tree.AVLTree`: a self-balancing binary search tree
  mapping keys to values, ordered by a three-way compare callable. It has
  `insert` (returns the new node; equal keys may be inserted more than
  once), `remove` (returns `False` when the key is absent), `remove_node`,
  `lookup` (returns `None` when the key is absent), `lookup_node`,
  `root_node`, `to_list` (keys in order), `len()` and iteration over keys
  in order. Nodes (`AVLTreeNode`) expose `key`, `value`, `parent`,
  `height`, `left`, `right` and `child(side)` with `Side.LEFT` /
  `Side.RIGHT`. The function `subtree_height(node)` gives a subtree's
  height, 0 for `None`.
- `collectkit.binary_heap.BinaryHeap` and
  `collectkit.binomial_heap.BinomialHeap`: priority queues with `insert`,
  `pop` and `len()`. Each is a min heap or a max heap, chosen with
  `HeapType.MIN` or `HeapType.MAX` (defined in `collectkit.binary_heap` and
  also importable from `collectkit.binomial_heap`). `pop` on an empty heap
  raises `IndexError`.
- `collectkit.bloom_filter.BloomFilter`: a probabilistic set membership
  test. It has `insert`, `query` and the `in` operator. Its bit table can be
  saved with `read` (returns `(table_size + 7) // 8` bytes) and restored
  with `load`, and two filters built with the same table size, hash function
  and number of functions can be combined with `union` and `intersection`
  (otherwise `ValueError`). At most `MAX_FUNCTIONS` (64) hash functions may
  be used, and the table size must be positive.
- `collectkit.compare`: ready-made comparison helpers: `int_equal`,
  `int_compare`, `pointer_equal` (same object) and `pointer_compare`
  (orders objects by identity).

## Installation

```
pip install collectkit
```

## Examples

```python
from collectkit.arraylist import ArrayList
from collectkit.compare import int_compare, int_equal

items = ArrayList([5, 3, 9])
items.prepend(1)
items.sort(int_compare)
print(list(items))                    # [1, 3, 5, 9]
print(items.index_of(int_equal, 9))   # 3
```

```python
from collectkit.avl_tree import AVLTree
from collectkit.compare import int_compare

tree = AVLTree(int_compare)
for key in (40, 10, 30, 20):
    tree.insert(key, str(key))
print(tree.lookup(30))         # 30
print(tree.to_list())          # [10, 20, 30, 40]
tree.remove(10)
print(len(tree))               # 3
```

```python
from collectkit.binary_heap import BinaryHeap, HeapType
from collectkit.compare import int_compare

heap = BinaryHeap(HeapType.MAX, int_compare)
for value in (4, 8, 1):
    heap.insert(value)
print(heap.pop())              # 8
```

`BinomialHeap` is used the same way.

```python
from collectkit.bloom_filter import BloomFilter

bloom = BloomFilter(128, hash, 4)
bloom.insert("apple")
print("apple" in bloom)        # True
saved = bloom.read()
```

A bloom filter can answer yes for a value that was never inserted. It never
answers no for a value that was inserted. The hash function's result is
reduced to 32 bits; to reload a saved table in another process, use a hash
function that gives the same results there (Python's built-in `hash` of a
string does not).

## What the package does not do

It is a library only: there is no command-line tool. None of the structures
are safe for concurrent modification from several threads, and apart from
the bloom filter's `read` / `load` there is no saving to or loading from
storage.

## Running the tests

```
pip install -e ".[test]"
pytest
```