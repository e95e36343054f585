from __future__ import annotations

from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from .config import get_settings


class Base(DeclarativeBase):
    pass


def _build_engine() -> AsyncEngine:
    settings = get_settings()
    options: dict[str, Any] = {"future": True, "echo": False}
    if not settings.database_url.startswith("sqlite"):
        options.update(
            pool_size=10,         # Connection pool size
            max_overflow=20,      # Allow burst capacity beyond pool_size
            pool_recycle=3600,    # Recycle connections after 1 hour
            pool_timeout=30,      # Max seconds to wait for connection from pool
        )
    return create_async_engine(settings.database_url, **options)


engine: AsyncEngine = _build_engine()
async_session_factory = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        yield session


async def create_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
