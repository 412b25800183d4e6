"""Text-based charts (sparklines) from tabular data."""

__version__ = "0.1.0"
