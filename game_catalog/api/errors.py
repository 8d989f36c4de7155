"""Translate service exceptions into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from game_catalog.core.exceptions import GameNotFoundError, RepositoryError


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def game_not_found_handler(request: Request, exc: GameNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(GameNotFoundError, game_not_found_handler)
