"""Structural classification of loosely formatted scholarship prose."""

__version__ = "0.1.0"
