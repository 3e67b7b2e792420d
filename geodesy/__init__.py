"""Coordinate tuples, coordinate sets with metadata, and context providers
holding operator constructors and resources."""

__version__ = "0.1.0"