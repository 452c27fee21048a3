"""Map grid loading, world assembly and text utilities for a grid-based raycasting game."""

__version__ = "0.1.0"

__all__ = ["grid", "lines", "model", "printf", "text", "textures", "world"]