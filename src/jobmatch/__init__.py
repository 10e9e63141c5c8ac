"""AI-assisted job recommendation pipeline."""

__version__ = "0.1.0"
