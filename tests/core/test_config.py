"""Unit tests for game_catalog/core/config.py"""

from pathlib import Path

from sqlalchemy import URL

from game_catalog.core.config import Settings


def test_defaults_from_empty_environment() -> None:
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.port == 3000
    assert settings.rate_limit_max == 100
    assert settings.rate_limit_window_seconds == 900
    assert settings.cors_origins == ["*"]
    assert settings.is_development


def test_values_from_environment() -> None:
    environ = {
        "DB_HOST": "db.internal",
        "DB_PORT": "3307",
        "DB_USER": "catalog",
        "DB_PASSWORD": "s3cret",
        "DB_NAME": "games",
        "DB_ECHO": "true",
        "PORT": "8080",
        "ENVIRONMENT": "production",
        "CORS_ORIGINS": "https://a.example, https://b.example",
        "RATE_LIMIT_MAX": "5",
        "GAME_IMAGES_DIR": "/srv/images",
    }
    settings = Settings.from_env(environ)
    assert settings.db_host == "db.internal"
    assert settings.db_port == 3307
    assert settings.db_echo is True
    assert settings.port == 8080
    assert not settings.is_development
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.rate_limit_max == 5
    assert settings.game_images_dir == Path("/srv/images")


def test_blank_values_count_as_unset() -> None:
    """`PORT=` style lines in a .env file fall back to the defaults instead of failing."""
    environ = {
        "PORT": "",
        "DB_PORT": "  ",
        "DB_POOL_SIZE": "",
        "RATE_LIMIT_MAX": "",
        "RATE_LIMIT_WINDOW_SECONDS": "",
        "DB_HOST": "",
        "DATABASE_URL": "",
        "CORS_ORIGINS": "",
    }
    assert Settings.from_env(environ) == Settings()


def test_mysql_url_built_from_parts() -> None:
    settings = Settings.from_env(
        {"DB_HOST": "db", "DB_USER": "catalog", "DB_PASSWORD": "pw", "DB_NAME": "games"}
    )
    url = settings.sqlalchemy_url
    assert isinstance(url, URL)
    assert url.drivername == "mysql+pymysql"
    assert url.host == "db"
    assert url.port == 3306
    assert url.username == "catalog"
    assert url.password == "pw"
    assert url.database == "games"


def test_database_url_overrides_parts() -> None:
    settings = Settings.from_env({"DATABASE_URL": "sqlite:///catalog.db", "DB_HOST": "ignored"})
    assert settings.sqlalchemy_url == "sqlite:///catalog.db"
