"""Format SQL statements with consistent clause layout, indentation and keyword case."""

__version__ = "0.1.0"