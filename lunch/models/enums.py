"""Enums for model fields."""

from enum import Enum


class Category(str, Enum):
    """Price tier of a restaurant."""

    CHEAP = "Cheap"
    NORMAL = "Normal"

    @classmethod
    def parse(cls, value: str) -> "Category | None":
        """Match a category case-insensitively, or return None."""
        normalized = value.strip().lower()
        for category in cls:
            if category.value.lower() == normalized:
                return category
        return None
