"""FastAPI dependencies."""

from fastapi import Request

from lunch.services.restaurant_store import RestaurantStore


def get_store(request: Request) -> RestaurantStore:
    """Return the store owned by the running application."""
    return request.app.state.store
