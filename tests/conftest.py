"""Pytest configuration and fixtures for newsroom.

Environment is set before newsroom is imported: settings are validated on
first use and newsroom.main builds the app at import time. HTTP tests run
against SQLite (aiosqlite) with the schema created from Base.metadata; the
image store and mail sender are replaced with in-memory fakes.
"""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

_TMP_DIR = Path(tempfile.mkdtemp(prefix="newsroom-tests-"))

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR / 'newsroom.db'}"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["VIEW_PURGE_INTERVAL_SECONDS"] = "0"
os.environ["IMAGE_STORE_BACKEND"] = "local"
os.environ["IMAGE_STORE_ROOT"] = str(_TMP_DIR / "media")
os.environ["UPLOAD_TMP_DIR"] = str(_TMP_DIR)
os.environ["MAIL_BACKEND"] = "log"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from newsroom.api.v1.dependencies import get_email_sender, get_image_store  # noqa: E402
from newsroom.application.dtos.content import StoredImage  # noqa: E402
from newsroom.infrastructure.exceptions import ImageUploadError  # noqa: E402
from newsroom.infrastructure.persistence import database  # noqa: E402
from newsroom.infrastructure.persistence import models  # noqa: E402, F401
from newsroom.infrastructure.persistence.repositories import AdminRepository  # noqa: E402
from newsroom.infrastructure.security.jwt import create_access_token  # noqa: E402
from newsroom.infrastructure.security.password import get_password_hash  # noqa: E402
from newsroom.main import app  # noqa: E402

ADMIN_EMAIL = "editor@example.com"
ADMIN_PASSWORD = "CorrectHorse42"


@dataclass
class FakeImageStore:
    """In-memory IImageStore recording uploads and deletes."""

    uploaded: list[StoredImage] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    fail_uploads: bool = False

    async def upload(self, path: str, folder: str) -> StoredImage:
        if self.fail_uploads:
            raise ImageUploadError("upload disabled")
        assert Path(path).is_file()
        image = StoredImage(
            url=f"https://img.test/{folder}/{len(self.uploaded)}.jpg",
            public_id=f"{folder}/{len(self.uploaded)}",
        )
        self.uploaded.append(image)
        return image

    async def delete(self, public_id: str) -> None:
        self.deleted.append(public_id)


@dataclass
class SentMail:
    to: str
    subject: str
    html: str


@dataclass
class RecordingEmailSender:
    """IEmailSender keeping every message in memory."""

    outbox: list[SentMail] = field(default_factory=list)

    async def send(self, to: str, subject: str, html: str) -> None:
        self.outbox.append(SentMail(to=to, subject=subject, html=html))


@pytest.fixture
async def db_schema():
    """Create all tables before the test and drop them (and the engine) after."""
    engine = database.get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.drop_all)
    await database.dispose_engine()


@pytest.fixture
async def db_session(db_schema) -> AsyncSession:
    """Session for seeding and inspecting rows directly."""
    async with database.get_session_factory()() as session:
        yield session


@pytest.fixture
def image_store() -> FakeImageStore:
    return FakeImageStore()


@pytest.fixture
def mail_sender() -> RecordingEmailSender:
    return RecordingEmailSender()


@pytest.fixture
async def client(db_schema, image_store, mail_sender) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with fake collaborators."""
    app.dependency_overrides[get_image_store] = lambda: image_store
    app.dependency_overrides[get_email_sender] = lambda: mail_sender
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def admin_account(db_session: AsyncSession) -> dict[str, str]:
    """Persist one admin and return its id, email and password."""
    admin = await AdminRepository(db_session).create_admin(
        "editor", ADMIN_EMAIL, get_password_hash(ADMIN_PASSWORD)
    )
    await db_session.commit()
    return {"id": admin.id, "email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}


@pytest.fixture
def admin_headers(admin_account: dict[str, str]) -> dict[str, str]:
    """Bearer header for protected endpoints."""
    token = create_access_token(
        {"sub": admin_account["id"], "email": admin_account["email"], "username": "editor"}
    )
    return {"Authorization": f"Bearer {token}"}
