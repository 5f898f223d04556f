"""DTOs for categories, subcategories, tags, posts, ads and subscriptions."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class StoredImage:
    """Location of an image held by the image store."""

    url: str
    public_id: str


@dataclass(frozen=True)
class CategoryRef:
    """Embedded category/subcategory reference (name + slug)."""

    id: str
    name: str
    slug: str


@dataclass(frozen=True)
class SubCategoryResult:
    id: str
    name: str
    slug: str
    category_id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    category: CategoryRef | None = None


@dataclass(frozen=True)
class CategoryResult:
    id: str
    name: str
    slug: str
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    subcategories: list[SubCategoryResult] = field(default_factory=list)


@dataclass(frozen=True)
class TagRef:
    id: str
    name: str


@dataclass(frozen=True)
class TagResult:
    """Tag with the number of posts that carry it."""

    id: str
    name: str
    post_count: int
    created_at: datetime


@dataclass(frozen=True)
class PostResult:
    id: str
    title: str
    slug: str
    content: str
    image: StoredImage
    category: CategoryRef | None
    sub_category: CategoryRef | None
    tags: list[TagRef]
    is_draft: bool
    is_favourite: bool
    views: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PostCreate:
    """Validated input for a new post (image handled separately)."""

    title: str
    content: str
    category_id: str
    sub_category_id: str | None = None
    tag_names: list[str] = field(default_factory=list)
    is_draft: bool = False
    is_favourite: bool = False


@dataclass(frozen=True)
class PostUpdate:
    """Partial post update. ``None`` means leave unchanged.

    ``clear_sub_category`` distinguishes "set to none" from "not given".
    """

    title: str | None = None
    content: str | None = None
    category_id: str | None = None
    sub_category_id: str | None = None
    clear_sub_category: bool = False
    tag_names: list[str] | None = None
    is_draft: bool | None = None
    is_favourite: bool | None = None


@dataclass(frozen=True)
class AdResult:
    id: str
    title: str
    type: str
    link: str
    image: StoredImage
    is_active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class SubscriptionResult:
    id: str
    email: str
    created_at: datetime


@dataclass(frozen=True)
class NavMenuResult:
    """Navigation categories in menu order."""

    categories: list[CategoryRef]
    updated_at: datetime | None = None
