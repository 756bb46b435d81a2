"""Restaurant and roll API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from lunch.api.dependencies import get_store
from lunch.exceptions import (
    DuplicateNameError,
    InvalidInputError,
    NoRestaurantsFoundError,
    StorageError,
)
from lunch.schemas.restaurant import (
    RecentSelectionsResponse,
    RestaurantCreate,
    RestaurantResponse,
    RollRequest,
)
from lunch.services.restaurant_store import RestaurantStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["restaurants"])

STORAGE_ERROR_DETAIL = "Something went wrong while accessing the restaurant list"


def storage_failure(e: StorageError) -> HTTPException:
    """Map a storage fault to an opaque 500 response."""
    logger.error(f"Storage failure: {e}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=STORAGE_ERROR_DETAIL
    )


@router.get("/restaurants", response_model=list[RestaurantResponse])
def list_restaurants(
    store: Annotated[RestaurantStore, Depends(get_store)],
    category: Annotated[str | None, Query(max_length=50)] = None,
):
    """List all restaurants, optionally only those in one category."""
    try:
        if category is None:
            return store.list_all()
        return store.list_by_category(category)
    except StorageError as e:
        raise storage_failure(e) from e


@router.post(
    "/restaurants", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED
)
def add_restaurant(
    data: RestaurantCreate,
    store: Annotated[RestaurantStore, Depends(get_store)],
):
    """Add a restaurant."""
    try:
        return store.add(data.name, data.category)
    except DuplicateNameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from None
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
    except StorageError as e:
        raise storage_failure(e) from e


@router.delete("/restaurants/{name:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_restaurant(
    name: str,
    store: Annotated[RestaurantStore, Depends(get_store)],
):
    """Remove a restaurant. Unknown names are ignored."""
    try:
        store.delete(name)
    except StorageError as e:
        raise storage_failure(e) from e


@router.post("/roll", response_model=RestaurantResponse)
def roll_lunch(
    data: RollRequest,
    store: Annotated[RestaurantStore, Depends(get_store)],
):
    """Pick a restaurant for lunch, avoiding the previous pick when possible."""
    try:
        return store.roll(data.category)
    except NoRestaurantsFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
    except StorageError as e:
        raise storage_failure(e) from e


@router.get("/roll/history", response_model=RecentSelectionsResponse)
def recent_selections(store: Annotated[RestaurantStore, Depends(get_store)]):
    """List recently rolled restaurant names, newest first."""
    try:
        return RecentSelectionsResponse(names=store.recent_selections())
    except StorageError as e:
        raise storage_failure(e) from e
