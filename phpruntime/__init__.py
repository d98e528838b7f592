"""PHP runtime values, type conversions, comparison operators and variable-handling functions."""

__version__ = "0.1.0"