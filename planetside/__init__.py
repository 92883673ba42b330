"""Simulation core for a small-planet game: terrain, foliage, points of interest, cables, player and camera."""

__version__ = "0.1.0"