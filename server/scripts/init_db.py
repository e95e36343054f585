"""Initialize the database by creating all tables."""
import asyncio

from mediadrop.core.db import create_tables
import mediadrop.models  # noqa: F401


async def init_db():
    """Create all tables in the database."""
    await create_tables()
    print("Database tables created successfully!")

if __name__ == "__main__":
    asyncio.run(init_db())
