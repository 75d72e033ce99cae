from __future__ import annotations

import os
from dataclasses import dataclass


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


@dataclass(frozen=True, slots=True)
class PoolSettings:
    pool_size: int = 10
    max_overflow: int = 20
    pool_recycle: int = 3600


def pool_settings() -> PoolSettings:
    """Read connection pool sizing from DB_POOL_SIZE / DB_MAX_OVERFLOW / DB_POOL_RECYCLE."""
    defaults = PoolSettings()
    return PoolSettings(
        pool_size=_int_env("DB_POOL_SIZE", defaults.pool_size),
        max_overflow=_int_env("DB_MAX_OVERFLOW", defaults.max_overflow),
        pool_recycle=_int_env("DB_POOL_RECYCLE", defaults.pool_recycle),
    )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")
