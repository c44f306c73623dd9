"""Feature module aggregation and public exports."""

from . import templates

__all__ = [
    "templates",
]
