"""Container data structures: array list, AVL tree, binary and binomial heaps, bloom filter."""

__version__ = "0.1.0"
__all__ = ["arraylist", "avl_tree", "binary_heap", "binomial_heap", "bloom_filter", "compare"]