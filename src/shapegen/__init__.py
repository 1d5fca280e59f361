"""Synthetic test geometry generation."""

__version__ = "0.1.0"
