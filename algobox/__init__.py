"""Classic algorithms: numbers, conversions, patterns, sorting, searching, graphs, text,
a growable array, linked lists and a small command line."""

__version__ = "0.1.0"

__all__ = [
    "circular",
    "cli",
    "conversions",
    "doubly",
    "graphs",
    "numbers",
    "patterns",
    "searching",
    "singly",
    "sorting",
    "text",
    "vector",
]