"""Run the service: `python -m game_catalog`"""

import uvicorn

from game_catalog.app import create_app
from game_catalog.core.config import Settings
from game_catalog.core.logging import configure_logging, get_logger


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level, development=settings.is_development)
    app = create_app(settings)
    get_logger(__name__).info("Server starting", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
