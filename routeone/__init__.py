"""A small terminal adventure of monster battles on Route 1."""

__version__ = "0.1.0"
__all__ = ["__version__"]