"""Response envelope shared by all endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from newsroom.application.dtos.pagination import PageInfo

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Success flag and message only."""

    success: bool = True
    message: str


class Envelope(BaseModel, Generic[T]):
    """``{"success": true, "message"?, "data"}``."""

    success: bool = True
    message: str | None = None
    data: T


class ListEnvelope(BaseModel, Generic[T]):
    """List payload with its item count."""

    success: bool = True
    count: int
    data: list[T]


class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    pages: int

    @classmethod
    def from_info(cls, info: PageInfo) -> "Pagination":
        return cls(total=info.total, page=info.page, limit=info.limit, pages=info.pages)


class PageEnvelope(BaseModel, Generic[T]):
    """One page of items plus pagination totals."""

    success: bool = True
    data: list[T] = Field(default_factory=list)
    pagination: Pagination
