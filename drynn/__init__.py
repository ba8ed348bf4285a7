"""Procedural star-cluster generation for a turn-based space strategy game."""

__version__ = "0.1.0"