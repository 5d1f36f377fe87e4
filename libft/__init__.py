"""Helpers for characters, numbers, byte buffers, strings, descriptor output, linked lists and line reading."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "memory", "strings", "output", "linkedlist", "nextline"]