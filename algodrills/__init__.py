"""Classic algorithm exercises: dynamic programming, sorting, searching, grids and graphs."""

__version__ = "0.1.0"