"""Classic data structures and algorithms: array edits, sparse triplets, recursion, searching, sorting, stacks and a stack menu."""

__version__ = "0.1.0"
__all__ = ["arrays", "recursion", "searching", "sorting", "stacks", "cli"]