"""strkit - bounded string buffers, zero-copy views and text utilities."""

__version__ = "0.1.0"
