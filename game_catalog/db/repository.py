"""Protocol repository (read-only access to the catalog)"""

from typing import Protocol

from game_catalog.core.models import FilterCriteria, GameArtwork, GameId, GameRecord


class VideoGameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, game_id: GameId) -> GameRecord | None:
        """Get game by ID, if record exists."""
        ...

    def list_games(self, criteria: FilterCriteria) -> list[GameRecord]:
        """All games matching every present filter as a substring."""
        ...

    def get_artwork(self, game_id: GameId) -> GameArtwork | None:
        """Artwork reference of a game, if record exists."""
        ...
