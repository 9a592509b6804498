"""Classic algorithms and data structures: numbers, sorting, searching, geometry, trees and graphs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "avl",
    "backtracking",
    "binary_tree",
    "circular_queue",
    "geometry",
    "graphs",
    "hashing",
    "morris",
    "numbers",
    "searching",
    "sorting",
    "trie",
]