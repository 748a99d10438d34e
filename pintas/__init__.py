"""Lightning-fast command alias manager."""

__version__ = "0.1.0"
