"""Read-only catalog endpoints"""

from typing import Annotated

from fastapi import APIRouter, Query

from game_catalog.api.dependencies import CatalogServiceDep
from game_catalog.api.models import (
    ArtworkResponse,
    ErrorResponse,
    GameFilterParams,
    GameResponse,
    MessageResponse,
)

router = APIRouter(
    prefix="/videogames",
    tags=["videogames"],
    responses={500: {"model": ErrorResponse, "description": "Storage error"}},
)


@router.get("", response_model=list[GameResponse])
def list_games(
    filters: Annotated[GameFilterParams, Query()], service: CatalogServiceDep
) -> list[GameResponse]:
    return service.list_games(filters)


@router.get("/{game_id}", response_model=GameResponse | MessageResponse)
def get_game(game_id: str, service: CatalogServiceDep) -> GameResponse | MessageResponse:
    return service.get_game(game_id)


@router.get(
    "/{game_id}/artwork",
    response_model=ArtworkResponse,
    responses={404: {"model": MessageResponse, "description": "No game with this ID"}},
)
def get_artwork(game_id: str, service: CatalogServiceDep) -> ArtworkResponse:
    return service.get_artwork(game_id)
