"""Pydantic schemas for API requests and responses."""

from lunch.schemas.restaurant import (
    RecentSelectionsResponse,
    RestaurantCreate,
    RestaurantResponse,
    RollRequest,
)

__all__ = [
    "RestaurantCreate",
    "RestaurantResponse",
    "RollRequest",
    "RecentSelectionsResponse",
]
