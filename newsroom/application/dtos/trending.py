"""DTOs for the view ledger and trending ranking."""

from dataclasses import dataclass
from datetime import datetime

from newsroom.application.dtos.content import StoredImage


@dataclass(frozen=True)
class TrendingCategory:
    """Category name/slug of a trending post; empty strings when uncategorized."""

    name: str = ""
    slug: str = ""


@dataclass(frozen=True)
class TrendingPostItem:
    """Uniform trending entry regardless of the tier that produced it."""

    id: str
    view_count: int
    title: str
    image: StoredImage
    created_at: datetime
    slug: str
    category: TrendingCategory
