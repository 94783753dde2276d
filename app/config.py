import os
from dataclasses import dataclass, field
from typing import List, Optional


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment (and .env, if loaded)."""
    database_url: str = "sqlite:///./classicmodels.db"
    pool_size: int = 10
    max_overflow: int = 0
    pool_timeout: int = 30
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    create_schema: bool = False
    seed_csv_dir: Optional[str] = None


def get_settings() -> Settings:
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        database_url=os.getenv("DATABASE_URL", Settings.database_url),
        pool_size=_get_int("DB_POOL_SIZE", Settings.pool_size),
        max_overflow=_get_int("DB_MAX_OVERFLOW", Settings.max_overflow),
        pool_timeout=_get_int("DB_POOL_TIMEOUT", Settings.pool_timeout),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=os.getenv("LOG_LEVEL", Settings.log_level).upper(),
        create_schema=_get_bool("CREATE_SCHEMA"),
        seed_csv_dir=os.getenv("SEED_CSV_DIR") or None,
    )
