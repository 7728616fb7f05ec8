"""Animated Lissajous curve table with keyboard controls, and a knight's tour solver."""

__version__ = "0.1.0"
__all__ = ["app", "controls", "curves", "knights", "scene"]