"""Stacks, queues, lists, heaps, binary trees, sorting algorithms, an address book and a noughts-and-crosses game."""

__version__ = "0.1.0"