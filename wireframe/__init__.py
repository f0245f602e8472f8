"""Parsing, projection and pygame display of .fdf height maps as wireframes."""

__version__ = "0.1.0"
__all__ = ["parsing", "projection", "view", "app"]