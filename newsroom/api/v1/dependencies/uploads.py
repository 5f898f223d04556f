"""Multipart image spooling bound to the configured upload limits."""

from contextlib import AbstractAsyncContextManager

from fastapi import UploadFile

from newsroom.core.config import get_settings
from newsroom.infrastructure.external.storage import spooled_image


def spooled_upload(upload: UploadFile) -> AbstractAsyncContextManager[str]:
    """Spool ``upload`` to a temp file; yields its path and removes it on exit."""
    settings = get_settings()
    return spooled_image(
        upload, max_bytes=settings.max_upload_size, tmp_dir=settings.upload_tmp_dir
    )
