"""Delete view ledger rows older than the retention period.

Usage:
    python -m scripts.purge_post_views [retention_days]
If retention_days is omitted, VIEW_RETENTION_DAYS from config is used.
"""

import asyncio
import sys

import newsroom.infrastructure.persistence.database as database
from newsroom.infrastructure.services import purge_expired_views


async def main() -> None:
    retention_days = None
    if len(sys.argv) > 1:
        try:
            retention_days = int(sys.argv[1])
        except ValueError:
            print(f"retention_days must be an integer, got: {sys.argv[1]}", file=sys.stderr)
            sys.exit(1)
        if retention_days < 1:
            print("retention_days must be >= 1", file=sys.stderr)
            sys.exit(1)

    session_factory = database.get_session_factory()
    try:
        async with session_factory() as session:
            async with session.begin():
                deleted = await purge_expired_views(session, retention_days=retention_days)
    finally:
        await database.dispose_engine()
    print(f"Deleted {deleted} view ledger row(s)")


if __name__ == "__main__":
    asyncio.run(main())
