"""Solutions to classic algorithm puzzles, with a linked list node and a max-heap."""

__version__ = "0.1.0"
__all__ = ["easy", "medium", "hard", "heap", "linked_list"]