"""Settings read from the process environment (and an optional .env file)."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Self

from dotenv import load_dotenv
from sqlalchemy import URL

# Repository root, used for the default static asset locations
PROJECT_ROOT = Path(__file__).resolve().parents[2]

TRUTHY = {"1", "true", "yes", "on"}


def _env(environ: Mapping[str, str], key: str, default: Any) -> Any:
    """Value of `key`, or `default` when it is unset or blank (`PORT=` in a .env file)."""
    value = environ.get(key)
    if value is None or not value.strip():
        return default
    return value


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass(frozen=True)
class Settings:
    """Process configuration. Built once at startup and passed down explicitly."""

    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "videogames"
    database_url: Optional[str] = None
    db_pool_size: int = 5
    db_echo: bool = False

    host: str = "0.0.0.0"
    port: int = 3000

    log_level: str = "INFO"
    environment: str = "development"

    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    rate_limit_max: int = 100
    rate_limit_window_seconds: int = 15 * 60

    public_dir: Path = PROJECT_ROOT / "public"
    game_images_dir: Path = PROJECT_ROOT / "game images"
    frontend_build_dir: Path = PROJECT_ROOT.parent / "frontend" / "build"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> Self:
        """
        Build settings from environment variables.
        ----
        When `environ` is None the real process environment is used, after loading a .env file if present.
        """
        if environ is None:
            if dotenv:
                load_dotenv()
            environ = os.environ

        defaults = cls()
        return cls(
            db_host=_env(environ, "DB_HOST", defaults.db_host),
            db_port=int(_env(environ, "DB_PORT", defaults.db_port)),
            db_user=_env(environ, "DB_USER", defaults.db_user),
            db_password=_env(environ, "DB_PASSWORD", defaults.db_password),
            db_name=_env(environ, "DB_NAME", defaults.db_name),
            database_url=_env(environ, "DATABASE_URL", None),
            db_pool_size=int(_env(environ, "DB_POOL_SIZE", defaults.db_pool_size)),
            db_echo=_env(environ, "DB_ECHO", "false").strip().lower() in TRUTHY,
            host=_env(environ, "HOST", defaults.host),
            port=int(_env(environ, "PORT", defaults.port)),
            log_level=_env(environ, "LOG_LEVEL", defaults.log_level),
            environment=_env(environ, "ENVIRONMENT", defaults.environment),
            cors_origins=_split_csv(_env(environ, "CORS_ORIGINS", "*")),
            rate_limit_max=int(_env(environ, "RATE_LIMIT_MAX", defaults.rate_limit_max)),
            rate_limit_window_seconds=int(
                _env(environ, "RATE_LIMIT_WINDOW_SECONDS", defaults.rate_limit_window_seconds)
            ),
            public_dir=Path(_env(environ, "PUBLIC_DIR", defaults.public_dir)),
            game_images_dir=Path(_env(environ, "GAME_IMAGES_DIR", defaults.game_images_dir)),
            frontend_build_dir=Path(_env(environ, "FRONTEND_BUILD_DIR", defaults.frontend_build_dir)),
        )

    @property
    def sqlalchemy_url(self) -> str | URL:
        """DATABASE_URL if given, otherwise a MySQL URL assembled from the DB_* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "mysql+pymysql",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def is_development(self) -> bool:
        return self.environment == "development"
