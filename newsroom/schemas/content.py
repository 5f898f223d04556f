"""Category, subcategory, tag, post, ad, subscription and nav menu schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from newsroom.core.constants import NAV_MENU_MAX_CATEGORIES


class ImageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    url: str
    public_id: str


class CategoryRefResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str


# ---- categories -----------------------------------------------------------


class SubCategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    category_id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    category: CategoryRefResponse | None = None


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    description: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    subcategories: list[SubCategoryResponse] = Field(default_factory=list)


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=50)
    description: str | None = Field(default=None, max_length=500)


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2, max_length=50)
    description: str | None = Field(default=None, max_length=500)
    is_active: bool | None = None


class SubCategoryCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=50)
    category_id: str = Field(..., description="Parent category id")
    is_active: bool = True


class SubCategoryUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2, max_length=50)
    category_id: str | None = None
    is_active: bool | None = None


# ---- tags -----------------------------------------------------------------


class TagRefResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class TagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    post_count: int


# ---- posts ----------------------------------------------------------------


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    slug: str
    content: str
    image: ImageResponse
    category: CategoryRefResponse | None = None
    sub_category: CategoryRefResponse | None = None
    tags: list[TagRefResponse] = Field(default_factory=list)
    is_draft: bool
    is_favourite: bool
    views: int
    created_at: datetime
    updated_at: datetime


class PostFilterMeta(BaseModel):
    filter_type: str
    filter_name: str
    filter_id: str


class TrendingCategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str = ""
    slug: str = ""


class TrendingPostResponse(BaseModel):
    """Uniform trending entry; view_count is 0 for recency fill-ins."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    view_count: int
    title: str
    image: ImageResponse
    created_at: datetime
    slug: str
    category: TrendingCategoryResponse


# ---- ads ------------------------------------------------------------------


class AdResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    type: str
    link: str
    image: ImageResponse
    is_active: bool
    created_at: datetime
    updated_at: datetime


# ---- subscriptions --------------------------------------------------------


class SubscriptionCreate(BaseModel):
    email: EmailStr


class SubscriptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    created_at: datetime


# ---- navigation menu ------------------------------------------------------


class NavMenuUpdate(BaseModel):
    category_ids: list[str] = Field(
        ..., description=f"Ordered category ids (max {NAV_MENU_MAX_CATEGORIES})"
    )


class NavMenuResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    categories: list[CategoryRefResponse] = Field(default_factory=list)
    updated_at: datetime | None = None
