"""FastAPI dependencies wiring a request to a session, repository and service."""

from typing import Annotated, Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from game_catalog.db.database import session_scope
from game_catalog.db.sql_repository import SQLVideoGameRepository
from game_catalog.services.catalog_service import CatalogService


def get_db(request: Request) -> Generator[Session, None, None]:
    yield from session_scope(request.app.state.session_factory)


def get_catalog_service(db: Annotated[Session, Depends(get_db)]) -> CatalogService:
    return CatalogService(SQLVideoGameRepository(db))


CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
