"""Data-structures and algorithms exercises: object lifetimes, a bank account, a linked list, shortest tours, an 8-puzzle solver and topological sorting."""

__version__ = "1.0.0"