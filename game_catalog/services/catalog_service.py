"""Orchestration of communication from API router to the persistence layer (and the reverse direction)."""

from game_catalog.api.models import ArtworkResponse, GameFilterParams, GameResponse, MessageResponse
from game_catalog.core.exceptions import GAME_NOT_FOUND_MESSAGE, GameNotFoundError
from game_catalog.core.models import GameId, GameRecord
from game_catalog.db.repository import VideoGameRepository


class CatalogService:
    """Read-only queries against the video game catalog."""

    def __init__(self, repository: VideoGameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def get_game(self, game_id: GameId) -> GameResponse | MessageResponse:
        """
        Single record by ID.
        ----
        A missing record is NOT an error here: the caller gets a message payload with a normal status.
        Compare with get_artwork(), which raises GameNotFoundError.
        """
        record = self.repo.get_game(game_id)
        if record is None:
            return MessageResponse(message=GAME_NOT_FOUND_MESSAGE)
        return self._create_game_response(record)

    def list_games(self, filters: GameFilterParams) -> list[GameResponse]:
        """Records where every supplied filter is a substring of the matching field. No filters: the full catalog."""
        records = self.repo.list_games(filters.to_criteria())
        return [self._create_game_response(record) for record in records]

    def get_artwork(self, game_id: GameId) -> ArtworkResponse:
        """Artwork URL of a game (may be null). Raises GameNotFoundError if there is no such game."""
        artwork = self.repo.get_artwork(game_id)
        if artwork is None:
            raise GameNotFoundError(game_id)
        return ArtworkResponse(artwork_url=artwork.artwork_url)

    # -- Internal helpers --
    def _create_game_response(self, record: GameRecord) -> GameResponse:
        return GameResponse.model_validate(record)
