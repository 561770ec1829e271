"""Script to create every table directly, without migrations (local development)."""

import asyncio

from sqlalchemy import text

from app.database import engine
from app.models import all_metadata


async def init_db() -> None:
    """Create the pgcrypto extension and all tables."""
    async with engine.begin() as conn:
        await conn.execute(text('CREATE EXTENSION IF NOT EXISTS "pgcrypto"'))

        for metadata in all_metadata:
            await conn.run_sync(metadata.create_all)

    await engine.dispose()
    print("✓ Database initialized successfully!")


if __name__ == "__main__":
    asyncio.run(init_db())
