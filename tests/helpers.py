"""Shared test helpers (multipart payloads, fixed ids)."""

# A JPEG header is enough: uploads are checked by content type and suffix only.
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 64

# Well-formed content id that never exists.
UNKNOWN_ID = "0123456789abcdef01234567"


def image_file(name: str = "photo.jpg") -> dict[str, tuple[str, bytes, str]]:
    """Multipart ``files`` argument carrying a small JPEG."""
    return {"image": (name, JPEG_BYTES, "image/jpeg")}
