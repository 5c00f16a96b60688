import os
from pathlib import Path
from pydantic import BaseModel, field_validator

# Data directory: FINTRACK_DATA_DIR if set (e.g. /data in Docker),
# otherwise ~/.local/share/fintrack for local use
_data_dir = os.environ.get("FINTRACK_DATA_DIR")
DATA_DIR = Path(_data_dir) if _data_dir else Path.home() / ".local" / "share" / "fintrack"
DEFAULT_DB_FILE = DATA_DIR / "fintrack.db"

DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]  # Vite dev server


class Settings(BaseModel):
    """Runtime settings for the API server."""
    database_url: str
    log_level: str = "INFO"
    cors_origins: list[str] = DEFAULT_CORS_ORIGINS

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


def ensure_data_dir() -> None:
    """Ensure the data directory exists."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def load_settings(database: Path | str | None = None) -> Settings:
    """
    Build settings from the environment.

    An explicit database path wins over FINTRACK_DATABASE_URL, which wins over
    the default file in the data directory.
    """
    if database is not None:
        database_url = f"sqlite:///{Path(database)}"
    else:
        database_url = os.environ.get("FINTRACK_DATABASE_URL", "")

    if not database_url:
        ensure_data_dir()
        database_url = f"sqlite:///{DEFAULT_DB_FILE}"

    origins = os.environ.get("FINTRACK_CORS_ORIGINS")
    return Settings(
        database_url=database_url,
        log_level=os.environ.get("FINTRACK_LOG_LEVEL", "INFO"),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else DEFAULT_CORS_ORIGINS,
    )
