"""Two-stack sorting with a limited set of operations."""

__version__ = "1.0.0"