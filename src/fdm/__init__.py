"""fdm — functional data modeling toolkit."""

__version__ = "0.1.0"
