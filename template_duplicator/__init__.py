"""Theme template browsing and duplication service."""

__version__ = "0.1.0"
