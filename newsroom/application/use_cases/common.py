"""Helpers shared by content use cases."""

from newsroom.application.dtos.pagination import PageInfo
from newsroom.core.constants import MAX_PAGE_SIZE
from newsroom.domain.exceptions import ResourceNotFoundException
from newsroom.shared.utils.generators import is_object_id


def require_object_id(value: str, resource_type: str) -> str:
    """Return value if it is a 24 hex char id; else raise ResourceNotFoundException (404).

    A malformed id can never match a row, so it is reported like an unknown one.
    """
    if not is_object_id(value):
        raise ResourceNotFoundException(resource_type, value)
    return value


def page_request(page: int, limit: int) -> PageInfo:
    """Clamp page/limit query values into a PageInfo with total unknown (0)."""
    page = max(1, page)
    limit = min(max(1, limit), MAX_PAGE_SIZE)
    return PageInfo(total=0, page=page, limit=limit)
