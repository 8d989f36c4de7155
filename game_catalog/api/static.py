"""Static assets: artwork images and the bundled frontend (with single-page-app fallback)."""

from pathlib import Path

from fastapi import FastAPI
from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from game_catalog.core.config import Settings
from game_catalog.core.logging import get_logger

log = get_logger(__name__)

INDEX_FILE = "index.html"


class FrontendStaticFiles(StaticFiles):
    """
    Serves files from several directories (first match wins).
    Unknown paths get the frontend's index.html, so client side routes survive a page reload.
    """

    def __init__(self, directories: list[Path]) -> None:
        super().__init__(directory=directories[0])
        self.all_directories = list(directories)

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
        return await super().get_response(INDEX_FILE, scope)


def mount_static(app: FastAPI, settings: Settings) -> None:
    """Mount whichever static directories exist. Must run after the API routers are included."""
    if settings.game_images_dir.is_dir():
        app.mount("/game-images", StaticFiles(directory=settings.game_images_dir), name="game-images")
    else:
        log.warning("Game images directory not found", directory=str(settings.game_images_dir))

    frontend_dirs = [d for d in (settings.public_dir, settings.frontend_build_dir) if d.is_dir()]
    if frontend_dirs:
        app.mount("/", FrontendStaticFiles(frontend_dirs), name="frontend")
    else:
        log.warning("No frontend directory found, serving the API only")
