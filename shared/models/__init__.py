"""Shared models"""

from .exercise import Exercise, Category, CATEGORIES

__all__ = [
    "Exercise",
    "Category",
    "CATEGORIES",
]
