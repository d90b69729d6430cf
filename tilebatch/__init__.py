"""Tile-based sprite batching on pygame: sprite sheets, a bitmap font, rooms and levels."""

__version__ = "0.1.0"