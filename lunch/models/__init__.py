"""SQLAlchemy models."""

from lunch.models.enums import Category
from lunch.models.recent_selection import RecentSelection
from lunch.models.restaurant import Restaurant

__all__ = [
    "Category",
    "Restaurant",
    "RecentSelection",
]
