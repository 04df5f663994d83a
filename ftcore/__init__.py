"""Helpers for ASCII characters, integer text, byte buffers, output to file descriptors, linked lists, line reading and row collections."""

__version__ = "0.1.0"

__all__ = ["chars", "numbers", "memory", "output", "linked_list", "line_reader", "matrix"]