"""Release version resolution and validation."""

__version__ = "0.1.0"
