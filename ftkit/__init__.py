"""ASCII character, byte-buffer, C-string, text, conversion, output and linked-list helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "cstring", "conversion", "output", "text", "linkedlist"]