"""Classic data structures and algorithms: graphs, trees, heaps and hash tables."""

__version__ = "0.1.0"
__all__ = [
    "avl",
    "booktree",
    "bst",
    "expression",
    "graphs",
    "hashing",
    "heapsort",
    "obst",
]