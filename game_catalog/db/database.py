"""Engine / session handling"""

from typing import Generator

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from game_catalog.core.config import Settings
from game_catalog.core.logging import get_logger

log = get_logger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Pooled engine shared by all requests. Each request checks out its own connection."""
    url = settings.sqlalchemy_url
    options: dict = {"echo": settings.db_echo, "pool_pre_ping": True}
    if not str(url).startswith("sqlite"):
        options["pool_size"] = settings.db_pool_size
    return create_engine(url, **options)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False)


def check_connection(engine: Engine) -> None:
    """Round trip to the database. Raises SQLAlchemyError if it cannot be reached."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    log.info("Connected to database", url=engine.url.render_as_string(hide_password=True))


def session_scope(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """One session per request, closed once the response is done."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
