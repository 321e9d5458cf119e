"""Seeded Perlin noise, octave helpers and a text-output wireframe terrain generator."""

__version__ = "0.1.0"
__all__ = ["mt19937", "perlin", "terrain"]