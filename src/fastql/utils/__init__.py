"""Utility helpers for fastql."""

from fastql.utils.decorators import traced

__all__ = [
    "traced",
]
