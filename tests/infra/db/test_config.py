from __future__ import annotations

import pytest

from dealership.infra.db.config import PoolSettings, database_url, pool_settings


def test_database_url_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://app:secret@db:5432/dealership")

    assert database_url() == "postgresql+psycopg://app:secret@db:5432/dealership"


def test_database_url_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


def test_pool_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DB_POOL_SIZE", "DB_MAX_OVERFLOW", "DB_POOL_RECYCLE"):
        monkeypatch.delenv(name, raising=False)

    assert pool_settings() == PoolSettings()


def test_pool_settings_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_SIZE", "3")
    monkeypatch.setenv("DB_MAX_OVERFLOW", "")
    monkeypatch.setenv("DB_POOL_RECYCLE", "60")

    assert pool_settings() == PoolSettings(pool_size=3, max_overflow=20, pool_recycle=60)


def test_pool_settings_rejects_non_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_SIZE", "ten")

    with pytest.raises(RuntimeError, match="DB_POOL_SIZE must be an integer"):
        pool_settings()
