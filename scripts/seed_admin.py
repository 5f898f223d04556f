"""Create an admin account.

Usage:
    python -m scripts.seed_admin <username> <email> <password>
"""

import asyncio
import sys

import newsroom.infrastructure.persistence.database as database
from newsroom.domain.exceptions import ResourceConflictException
from newsroom.infrastructure.persistence.repositories import AdminRepository
from newsroom.infrastructure.security.password import get_password_hash


async def main() -> None:
    """Insert one admin with a hashed password."""
    if len(sys.argv) < 4:
        print(
            "Usage: python -m scripts.seed_admin <username> <email> <password>",
            file=sys.stderr,
        )
        sys.exit(1)
    username, email, password = sys.argv[1], sys.argv[2], sys.argv[3]
    if len(password) < 8:
        print("Password must be at least 8 characters", file=sys.stderr)
        sys.exit(1)

    session_factory = database.get_session_factory()
    try:
        async with session_factory() as session:
            async with session.begin():
                admin = await AdminRepository(session).create_admin(
                    username, email, get_password_hash(password)
                )
    except ResourceConflictException as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)
    finally:
        await database.dispose_engine()
    print(f"Admin created: {admin.id} ({admin.email})")


if __name__ == "__main__":
    asyncio.run(main())
