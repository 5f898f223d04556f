"""Domain entities."""

from newsroom.domain.entities.admin import AdminEntity

__all__ = ["AdminEntity"]
