"""Helpers for byte buffers, NUL-terminated strings, ASCII characters, ANSI colours, descriptor output and linked lists."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "colors", "strings", "output", "transform", "linked"]