"""Lower and upper iteration bounds for key ranges and key prefixes."""

__version__ = "0.1.0"
__all__ = ["iter_range"]