"""Extract KEY=VALUE pairs from a fenced ENV block in free-form text."""

__version__ = "0.1.0"
