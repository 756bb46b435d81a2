"""Restaurant schemas."""

from pydantic import BaseModel, ConfigDict, Field


class RestaurantCreate(BaseModel):
    """Add a restaurant."""

    name: str = Field(..., max_length=255)
    category: str = Field(..., max_length=50)


class RestaurantResponse(BaseModel):
    """Restaurant response."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    category: str


class RollRequest(BaseModel):
    """Roll for lunch within a category."""

    category: str = Field(..., max_length=50)


class RecentSelectionsResponse(BaseModel):
    """Names of the most recently rolled restaurants, newest first."""

    names: list[str]
