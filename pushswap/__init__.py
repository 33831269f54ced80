"""Two-stack sorting puzzle: argument checks, stack instructions and helpers."""

__version__ = "0.1.0"