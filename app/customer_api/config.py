import os
from dataclasses import dataclass

from sqlalchemy.engine import URL


@dataclass(frozen=True)
class Settings:
    env: str
    database_url: str
    log_level: str
    auto_create_schema: bool


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _database_url() -> str:
    explicit = _getenv("DATABASE_URL")
    if explicit:
        return explicit
    host = _getenv("DB_HOST")
    if not host:
        return "sqlite:///customers.db"
    # MySQL deployments configure the connection piecewise.
    url = URL.create(
        "mysql+pymysql",
        username=_getenv("DB_USER", "root"),
        password=_getenv("DB_PASSWORD") or None,
        host=host,
        port=int(_getenv("DB_PORT", "3306")),
        database=_getenv("DB_NAME", "customers"),
    )
    return url.render_as_string(hide_password=False)


def load_settings() -> Settings:
    return Settings(
        env=_getenv("ENV", "development"),
        database_url=_database_url(),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
        auto_create_schema=_getenv("AUTO_CREATE_SCHEMA", "1").lower() in ("1", "true", "yes"),
    )


def load_config() -> dict:
    s = load_settings()
    return {
        "ENV": s.env,
        "DATABASE_URL": s.database_url,
        "LOG_LEVEL": s.log_level,
        "AUTO_CREATE_SCHEMA": s.auto_create_schema,
    }
