from __future__ import annotations

import os
import pathlib
from typing import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

TEST_DB = pathlib.Path("./test_mediadrop.db")

os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{TEST_DB}")
os.environ.setdefault("IMAGEKIT_PUBLIC_KEY", "public_test_key")
os.environ.setdefault("IMAGEKIT_PRIVATE_KEY", "private_test_key")
os.environ.setdefault("IMAGEKIT_UPLOAD_URL", "https://upload.test/api/v1/files/upload")
os.environ.setdefault("IMAGEKIT_TOKEN_TTL_SECONDS", "1800")

from mediadrop.app import app  # noqa: E402
from mediadrop.core.db import Base, engine  # noqa: E402
from mediadrop.schemas.imagekit import UploadCredential  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def _cleanup_database() -> Iterator[None]:
    yield
    if TEST_DB.exists():
        TEST_DB.unlink()


@pytest_asyncio.fixture
async def database() -> AsyncIterator[None]:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    # Pooled connections are bound to this test's event loop.
    await engine.dispose()


@pytest_asyncio.fixture
async def async_client(database: None) -> AsyncIterator[AsyncClient]:  # noqa: ARG001
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest.fixture
def credential() -> UploadCredential:
    return UploadCredential(signature="abc123", expire=1_900_000_000, token="token-1")
