"""Local image store and mail template rendering."""

from pathlib import Path

import pytest

from newsroom.infrastructure.exceptions import ImageUploadError
from newsroom.infrastructure.external.email.templates import EmailTemplateRenderer
from newsroom.infrastructure.external.storage.local_store import LocalImageStore


@pytest.fixture
def source_image(tmp_path: Path) -> Path:
    path = tmp_path / "incoming.JPG"
    path.write_bytes(b"\xff\xd8\xff" + b"\x01" * 200)
    return path


async def test_local_store_upload_and_delete(tmp_path: Path, source_image: Path) -> None:
    store = LocalImageStore(str(tmp_path / "media"), base_url="/media/")
    image = await store.upload(str(source_image), "news-posts")

    assert image.public_id.startswith("news-posts/")
    assert image.public_id.endswith(".jpg")
    assert image.url == f"/media/{image.public_id}"
    stored = tmp_path / "media" / image.public_id
    assert stored.read_bytes() == source_image.read_bytes()
    assert not list(stored.parent.glob(".tmp_*"))

    await store.delete(image.public_id)
    assert not stored.exists()


async def test_local_store_delete_ignores_traversal_and_missing(tmp_path: Path) -> None:
    outside = tmp_path / "secret.txt"
    outside.write_text("keep")
    store = LocalImageStore(str(tmp_path / "media"))

    await store.delete("../secret.txt")
    await store.delete("news-posts/missing.jpg")
    await store.delete("")
    assert outside.exists()


async def test_local_store_upload_of_missing_file_fails(tmp_path: Path) -> None:
    store = LocalImageStore(str(tmp_path / "media"))
    with pytest.raises(ImageUploadError):
        await store.upload(str(tmp_path / "nope.jpg"), "news-posts")


def test_otp_template_renders_code_and_escapes_app_name() -> None:
    subject, html = EmailTemplateRenderer().render(
        "password_reset_otp", app_name="Daily <News>", otp="048213", expires_minutes=5
    )
    assert subject == "Verification Email from Daily &lt;News&gt;"
    assert "048213" in html
    assert "expires in 5 minutes" in html


def test_unknown_template_raises() -> None:
    with pytest.raises(KeyError):
        EmailTemplateRenderer().render("welcome")
