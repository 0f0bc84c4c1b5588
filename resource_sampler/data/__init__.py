"""Data provider package."""

from .provider import PsutilProvider

__all__ = [
    "PsutilProvider",
]
