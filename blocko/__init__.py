"""A small block-shooting platformer with levels loaded from a text file."""

__version__ = "0.1.0"
__all__ = ["__version__"]