"""Admin repository: credential lookup and compare-and-swap reset-state writes."""

from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.dtos.admin import AdminResult
from newsroom.domain.entities.admin import AdminEntity, normalize_email
from newsroom.domain.exceptions import (
    ResetSessionConflictException,
    ResourceConflictException,
)
from newsroom.domain.value_objects.reset_session import ResetSession
from newsroom.infrastructure.persistence.models.admin import Admin
from newsroom.infrastructure.persistence.repositories.base import BaseRepository
from newsroom.shared.utils.datetime import ensure_utc, utc_now
from newsroom.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _reset_state_from_row(row: Admin) -> ResetSession:
    return ResetSession(
        otp_hash=row.otp_hash,
        otp_expires_at=ensure_utc(row.otp_expires_at),
        otp_verified=row.otp_verified,
        otp_attempts=row.otp_attempts,
        locked_until=ensure_utc(row.locked_until),
        last_otp_request_at=ensure_utc(row.last_otp_request_at),
        session_active=row.reset_session_active,
        session_expires_at=ensure_utc(row.reset_session_expires_at),
    )


def _reset_state_columns(state: ResetSession) -> dict[str, Any]:
    return {
        "otp_hash": state.otp_hash,
        "otp_expires_at": state.otp_expires_at,
        "otp_verified": state.otp_verified,
        "otp_attempts": state.otp_attempts,
        "locked_until": state.locked_until,
        "last_otp_request_at": state.last_otp_request_at,
        "reset_session_active": state.session_active,
        "reset_session_expires_at": state.session_expires_at,
    }


def _admin_to_entity(row: Admin) -> AdminEntity:
    return AdminEntity(
        id=row.id,
        username=row.username,
        email=row.email,
        hashed_password=row.hashed_password,
        reset=_reset_state_from_row(row),
        version=row.version,
        created_at=ensure_utc(row.created_at),
    )


class AdminRepository(BaseRepository[Admin]):
    """Admin repository. Reset-state writes commit immediately.

    The write is ``UPDATE ... WHERE id = :id AND version = :expected`` so two
    requests racing on the same reset session cannot both win.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Admin)

    async def get_by_email(self, email: str) -> AdminEntity | None:
        result = await self.db.execute(
            select(Admin)
            .where(Admin.email == normalize_email(email))
            .execution_options(populate_existing=True)
        )
        row = result.scalar_one_or_none()
        return _admin_to_entity(row) if row else None

    async def save_reset_state(
        self, admin_id: str, expected_version: int, state: ResetSession
    ) -> int:
        return await self._compare_and_swap(
            admin_id, expected_version, _reset_state_columns(state)
        )

    async def change_password(
        self,
        admin_id: str,
        expected_version: int,
        hashed_password: str,
        state: ResetSession,
    ) -> int:
        values = _reset_state_columns(state)
        values["hashed_password"] = hashed_password
        return await self._compare_and_swap(admin_id, expected_version, values)

    async def _compare_and_swap(
        self, admin_id: str, expected_version: int, values: dict[str, Any]
    ) -> int:
        new_version = expected_version + 1
        result = await self.db.execute(
            update(Admin)
            .where(Admin.id == admin_id, Admin.version == expected_version)
            .values(**values, version=new_version, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            await self.db.rollback()
            logger.warning(
                "Reset state write lost a race: admin_id=%s expected_version=%d",
                admin_id,
                expected_version,
            )
            raise ResetSessionConflictException(admin_id)
        await self.db.commit()
        return new_version

    async def create_admin(
        self, username: str, email: str, hashed_password: str
    ) -> AdminResult:
        """Create an admin; raise ResourceConflictException on duplicate email."""
        admin = Admin(
            username=username.strip(),
            email=normalize_email(email),
            hashed_password=hashed_password,
        )
        try:
            created = await self.add(admin)
        except IntegrityError:
            raise ResourceConflictException(
                f"Email '{normalize_email(email)}' already exists", field="email"
            ) from None
        return AdminResult(
            id=created.id,
            username=created.username,
            email=created.email,
            created_at=ensure_utc(created.created_at),
        )
