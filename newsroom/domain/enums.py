"""Domain enumerations for the newsroom application.

Enums represent fixed sets of domain values (e.g. ad placement).
"""

from enum import Enum


class AdType(str, Enum):
    """Ad placement shape; the frontend picks slots by type."""

    HORIZONTAL = "horizontal"
    SQUARE = "square"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid type values as strings."""
        return [ad_type.value for ad_type in cls]


class PostFilterType(str, Enum):
    """What a /post/filter/{id} lookup resolved to."""

    ALL = "all"
    CATEGORY = "category"
    TAG = "tag"
