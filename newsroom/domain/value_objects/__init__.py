"""Domain value objects."""

from newsroom.domain.value_objects.reset_session import (
    ResetPolicy,
    ResetSession,
    ResetSessionState,
    Transition,
)

__all__ = ["ResetPolicy", "ResetSession", "ResetSessionState", "Transition"]
