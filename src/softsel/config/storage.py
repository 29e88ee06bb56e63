"""Location of the resolvable store."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from .env import env_value
from .errors import InvalidConfigurationError

APP_DIR_NAME: Final[str] = "softsel"
DATABASE_FILENAME: Final[str] = "resolvables.db"
DATA_DIR_VAR: Final[str] = "SOFTSEL_DATA_DIR"
DATABASE_URI_VAR: Final[str] = "DATABASE_URI"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    database_filename: str = DATABASE_FILENAME

    @property
    def database_path(self) -> Path:
        return self.data_dir / self.database_filename

    def database_uri(self) -> str:
        """Return the sqlite URI of the store file, creating the data directory."""

        self.data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite+pysqlite:///{self.database_path}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def _default_data_dir() -> Path:
    xdg_data_home = env_value("XDG_DATA_HOME")
    base = Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"
    return base / APP_DIR_NAME


def get_storage_config() -> StorageConfig:
    configured = env_value(DATA_DIR_VAR)
    data_dir = Path(configured) if configured else _default_data_dir()
    return StorageConfig(data_dir=data_dir.expanduser().resolve())


def parse_database_uri(uri: str, *, source: str = DATABASE_URI_VAR) -> DatabaseConfig:
    """Check that ``uri`` is a SQLAlchemy URL; ``source`` names it in the error."""

    try:
        make_url(uri)
    except ArgumentError as exc:
        raise InvalidConfigurationError(source, uri, "not a SQLAlchemy database URL") from exc
    return DatabaseConfig(uri=uri)


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    """``DATABASE_URI`` when set, else the sqlite file in the data directory."""

    uri = env_value(DATABASE_URI_VAR)
    if uri is not None:
        return parse_database_uri(uri)
    storage_config = storage or get_storage_config()
    return DatabaseConfig(uri=storage_config.database_uri())
