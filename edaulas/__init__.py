"""Data-structure and algorithm exercises: trees, AVL rotations, sorts, searches, graphs and grades."""

__version__ = "0.1.0"
__all__ = [
    "advanced_sorts",
    "avl",
    "bst",
    "cli",
    "grades",
    "graphs",
    "searching",
    "shell",
    "simple_sorts",
    "words",
]