"""Particle collision simulation with brute-force and quadtree detection."""

__version__ = "0.1.0"