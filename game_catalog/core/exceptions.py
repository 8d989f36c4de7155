"""Exceptions raised across layers. The API layer maps these onto HTTP responses."""

GAME_NOT_FOUND_MESSAGE = "Game not found"


class CatalogError(Exception):
    """Base class for errors raised by the catalog service."""


class RepositoryError(CatalogError):
    """The storage layer failed to answer a query. The message is the underlying driver message."""


class GameNotFoundError(CatalogError):
    """No record matches the requested ID."""

    def __init__(self, game_id: int | str, message: str = GAME_NOT_FOUND_MESSAGE) -> None:
        super().__init__(message)
        self.game_id = game_id
        self.message = message
