"""
Domain models and value objects.

Contains the fixed-dimension Tuple value type and its errors.
"""

from src.rt_core.domain.tuple import DimensionMismatch, IndexOutOfBounds, Tuple

__all__ = [
    "Tuple",
    "DimensionMismatch",
    "IndexOutOfBounds",
]
