"""Classic data structures and algorithms: sorting, searching, recursion,
heaps, graphs, linked lists and binary trees, in plain Python."""

__version__ = "0.1.0"