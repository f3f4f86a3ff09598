"""Linked lists, stacks, queues, sorting and backtracking algorithms."""

__version__ = "0.1.0"