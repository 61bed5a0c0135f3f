"""Event-driven normalization of staged photos."""

__version__ = "0.1.0"
