"""Spool multipart uploads to temp files for the image store.

The image store works on file paths (the Cloudinary SDK uploads from a
path), so uploads are written to a temp file first and removed afterwards.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiofiles
from starlette.datastructures import UploadFile

from newsroom.domain.exceptions import ValidationException
from newsroom.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 64 * 1024  # 64KB
ALLOWED_IMAGE_SUFFIXES = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp", ".avif"})


def _validate_image(upload: UploadFile) -> str:
    suffix = Path(upload.filename or "").suffix.lower()
    content_type = upload.content_type or ""
    if not content_type.startswith("image/") or suffix not in ALLOWED_IMAGE_SUFFIXES:
        raise ValidationException("Only image files are allowed", field="image")
    return suffix


@asynccontextmanager
async def spooled_image(
    upload: UploadFile,
    *,
    max_bytes: int,
    tmp_dir: str | None = None,
) -> AsyncIterator[str]:
    """Write an uploaded image to a temp file and yield its path.

    Raises ValidationException for non-images and files above max_bytes.
    The temp file is always removed; removal errors are logged only.
    """
    suffix = _validate_image(upload)
    fd, temp_path = tempfile.mkstemp(prefix="upload_", suffix=suffix, dir=tmp_dir)
    os.close(fd)
    try:
        written = 0
        async with aiofiles.open(temp_path, "wb") as out:
            while chunk := await upload.read(CHUNK_SIZE):
                written += len(chunk)
                if written > max_bytes:
                    raise ValidationException(
                        f"Image exceeds the maximum size of {max_bytes // (1024 * 1024)}MB",
                        field="image",
                    )
                await out.write(chunk)
        if written == 0:
            raise ValidationException("Image file is empty", field="image")
        yield temp_path
    finally:
        try:
            os.unlink(temp_path)
        except OSError as e:
            logger.warning("Could not remove temp upload %s: %s", temp_path, e)
