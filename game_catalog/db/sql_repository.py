"""Implementation of (VideoGame)Repository using SQLAlchemy"""

from typing import Callable, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from game_catalog.core.exceptions import RepositoryError
from game_catalog.core.logging import get_logger
from game_catalog.core.models import FilterCriteria, GameArtwork, GameId, GameRecord
from game_catalog.db.filters import SubstringFilter
from game_catalog.db.schema import DBVideoGame

log = get_logger(__name__)

T = TypeVar("T")


def driver_message(exc: SQLAlchemyError) -> str:
    """
    Human readable message of the DBAPI error behind `exc`.
    ----
    MySQL drivers carry (errno, message) in args; only the message is kept.
    """
    orig = getattr(exc, "orig", None)
    if orig is None:
        return str(exc)
    if len(orig.args) > 1:
        return str(orig.args[-1])
    return str(orig)


class SQLVideoGameRepository:
    """Data read using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: GameId) -> GameRecord | None:
        """Get game by ID, if record exists."""
        query = select(DBVideoGame).where(DBVideoGame.id == game_id)
        game_db = self._run("get_game", lambda: self.db.scalar(query))
        if game_db:
            return self._to_model(game_db)
        return None

    def list_games(self, criteria: FilterCriteria) -> list[GameRecord]:
        """All games matching every present filter as a substring."""
        query = SubstringFilter.from_criteria(criteria).apply(select(DBVideoGame))
        games_db = self._run("list_games", lambda: self.db.scalars(query).all())
        return [self._to_model(game_db) for game_db in games_db]

    def get_artwork(self, game_id: GameId) -> GameArtwork | None:
        """Only the artwork_url column of a game, if record exists."""
        query = select(DBVideoGame.artwork_url).where(DBVideoGame.id == game_id)
        row = self._run("get_artwork", lambda: self.db.execute(query).first())
        if row is None:
            return None
        return GameArtwork(game_id=game_id, artwork_url=row.artwork_url)

    def _run(self, operation: str, fetch: Callable[[], T]) -> T:
        """Execute a fetch, converting driver errors into RepositoryError with the driver's message."""
        try:
            return fetch()
        except SQLAlchemyError as exc:
            self.db.rollback()
            message = driver_message(exc)
            log.error("Query failed", operation=operation, error=message, exc_info=True)
            raise RepositoryError(message) from exc

    def _to_model(self, game_db: DBVideoGame) -> GameRecord:
        """Convert SQLAlchemy model to data transfer model."""
        return GameRecord(
            id=game_db.id,
            title=game_db.title,
            developer=game_db.developer,
            publisher=game_db.publisher,
            genre=game_db.genre,
            platform=game_db.platform,
            artwork_url=game_db.artwork_url,
        )
