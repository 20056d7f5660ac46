"""Classic data structures, sorting, mazes, k-means clustering and similarity search."""

__version__ = "1.0.0"

__all__ = [
    "linked",
    "misc",
    "sorting",
    "maze",
    "bst",
    "avl",
    "rbtree",
    "general_tree",
    "labyrinth",
    "vectors",
    "matrix",
    "cluster",
    "simsearch",
    "benchmark",
]