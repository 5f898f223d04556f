"""Local filesystem image store with path validation and atomic writes."""

from __future__ import annotations

import os
import secrets
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os

from newsroom.application.dtos.content import StoredImage
from newsroom.infrastructure.exceptions import ImageUploadError
from newsroom.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class LocalImageStore:
    """IImageStore on the local filesystem.

    public_id is the path relative to the root (``<folder>/<token><ext>``);
    files are served under base_url by the application's static mount.
    Writes use temp file + rename so readers never see partial images.
    """

    CHUNK_SIZE = 64 * 1024  # 64KB

    def __init__(self, root: str, base_url: str = "/media") -> None:
        self.root = Path(root).resolve()
        self.base_url = base_url.rstrip("/")
        self.root.mkdir(parents=True, exist_ok=True, mode=0o750)

    def _resolve(self, public_id: str) -> Path:
        """Resolve public_id under root. Raises ValueError on traversal."""
        full_path = (self.root / public_id).resolve()
        full_path.relative_to(self.root)
        return full_path

    async def upload(self, path: str, folder: str) -> StoredImage:
        suffix = Path(path).suffix.lower()
        public_id = f"{folder.strip('/')}/{secrets.token_hex(12)}{suffix}"
        try:
            target = self._resolve(public_id)
            target.parent.mkdir(parents=True, exist_ok=True, mode=0o750)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=target.parent, prefix=".tmp_", suffix=suffix
            )
            os.close(temp_fd)
            try:
                async with aiofiles.open(path, "rb") as src, aiofiles.open(
                    temp_path, "wb"
                ) as dst:
                    while chunk := await src.read(self.CHUNK_SIZE):
                        await dst.write(chunk)
                os.chmod(temp_path, 0o640)
                await aiofiles.os.rename(temp_path, target)
            finally:
                if Path(temp_path).exists():
                    os.unlink(temp_path)
        except (OSError, ValueError) as e:
            logger.error("Local image upload failed for %s: %s", folder, e)
            raise ImageUploadError(str(e)) from e
        return StoredImage(url=f"{self.base_url}/{public_id}", public_id=public_id)

    async def delete(self, public_id: str) -> None:
        if not public_id:
            return
        try:
            file_path = self._resolve(public_id)
            if file_path.exists():
                await aiofiles.os.remove(file_path)
        except (OSError, ValueError) as e:
            logger.error("Error deleting image %s: %s", public_id, e)
