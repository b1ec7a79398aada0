"""SQLAlchemy async engine and the single key-value table behind it."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import structlog
from sqlalchemy import DateTime, String, Text, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from stressless.config import get_settings
from stressless.errors import StorageError
from stressless.storage.base import KeyValueStore

logger = structlog.get_logger(__name__)


# ── Base ──────────────────────────────────────────────────────

class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


# ── ORM tables ────────────────────────────────────────────────

class KeyValueRow(Base):
    """One stored value; the history lives under a single key."""

    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )


# ── Store ─────────────────────────────────────────────────────

def _ensure_sqlite_dir(url: str) -> None:
    if url.startswith("sqlite") and "///" in url:
        # URL format: sqlite+aiosqlite:///path/to/db
        path = url.split("///", 1)[-1]
        if path and path != ":memory:":
            Path(path).parent.mkdir(parents=True, exist_ok=True)


class SQLiteStore(KeyValueStore):
    """Key-value store persisted through SQLAlchemy (aiosqlite by default)."""

    def __init__(self, database_url: str | None = None) -> None:
        self._url = database_url or get_settings().database_url
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    def _get_engine(self) -> AsyncEngine:
        if self._engine is None:
            _ensure_sqlite_dir(self._url)
            self._engine = create_async_engine(self._url, echo=False)
        return self._engine

    def _sessions(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(self._get_engine(), expire_on_commit=False)
        return self._session_factory

    async def init(self) -> None:
        """Create the table (idempotent)."""
        try:
            async with self._get_engine().begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(f"could not initialise {self._url}: {exc}") from exc
        logger.info("storage.initialised", url=self._url)

    async def get_item(self, key: str) -> str | None:
        try:
            async with self._sessions()() as session:
                result = await session.execute(select(KeyValueRow.value).where(KeyValueRow.key == key))
                return result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(f"read of {key!r} failed: {exc}") from exc

    async def set_item(self, key: str, value: str) -> None:
        try:
            async with self._sessions()() as session:
                row = await session.get(KeyValueRow, key)
                if row is None:
                    session.add(KeyValueRow(key=key, value=value))
                else:
                    row.value = value
                await session.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(f"write of {key!r} failed: {exc}") from exc

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
