"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from game_catalog.core.models import FilterCriteria


# --- REQUEST MODELS ---
class GameFilterParams(BaseModel):
    """Optional substring filters taken from the query string of GET /videogames."""

    title: Optional[str] = None
    developer: Optional[str] = None
    publisher: Optional[str] = None
    genre: Optional[str] = None
    platform: Optional[str] = None

    def to_criteria(self) -> FilterCriteria:
        return FilterCriteria.from_mapping(self.model_dump())


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    """A catalog record, flat, with the column names as keys."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    developer: str
    publisher: str
    genre: str
    platform: str
    artwork_url: Optional[str] = None


class ArtworkResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    artwork_url: Optional[str] = Field(alias="artworkUrl")


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
