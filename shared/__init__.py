"""Shared module - 플랜 엔진과 API 계층이 공유하는 모듈"""

from shared.models.exercise import Exercise, Category, CATEGORIES

__all__ = [
    "Exercise",
    "Category",
    "CATEGORIES",
]
