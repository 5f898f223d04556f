"""Slug helpers built on python-slugify."""

from slugify import slugify


def make_slug(text: str) -> str:
    """Return a lower-case, hyphenated slug for a title or name."""
    return slugify(text, lowercase=True)
