"""SQLAlchemy Users Query Gateway.

UsersQueryGateway 포트의 구현체입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from apps.auth_policy.application.common.exceptions import GatewayError
from apps.auth_policy.infrastructure.persistence_sqla.constants import USER_TABLE
from apps.auth_policy.infrastructure.persistence_sqla.mappings import (
    decode_bool,
    map_user_row,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from apps.auth_policy.domain.entities.user import User

SELECT_USER_BY_EMAIL = text(f'SELECT * FROM "{USER_TABLE}" WHERE email = :email')
SELECT_USER_BY_ID = text(f'SELECT * FROM "{USER_TABLE}" WHERE id = :id')
SELECT_ADMIN_BY_ID = text(f'SELECT admin FROM "{USER_TABLE}" WHERE id = :id')
SELECT_EXISTS_BY_EMAIL = text(
    f'SELECT EXISTS(SELECT 1 FROM "{USER_TABLE}" WHERE email = :email)'
)


class SqlaUsersQueryGateway:
    """SQLAlchemy 기반 Users Query Gateway.

    UsersQueryGateway 구현체.
    """

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def get_by_email(self, email: str) -> "User | None":
        """이메일로 사용자 조회."""
        try:
            result = await self._session.execute(SELECT_USER_BY_EMAIL, {"email": email})
        except SQLAlchemyError as e:
            raise GatewayError("User query by email failed") from e

        row = result.mappings().first()
        if row is None:
            return None
        return map_user_row(row)

    async def get_by_id(self, user_id: UUID) -> "User | None":
        """ID로 사용자 조회 (id는 16바이트로 바인딩)."""
        try:
            result = await self._session.execute(SELECT_USER_BY_ID, {"id": user_id.bytes})
        except SQLAlchemyError as e:
            raise GatewayError("User query by id failed") from e

        row = result.mappings().first()
        if row is None:
            return None
        return map_user_row(row)

    async def fetch_admin_flag(self, user_id: UUID) -> bool | None:
        """관리자 플래그 조회. 저장소 오류는 그대로 전파합니다."""
        result = await self._session.execute(SELECT_ADMIN_BY_ID, {"id": user_id.bytes})
        row = result.first()
        if row is None:
            return None
        return decode_bool("admin", row[0])

    async def exists_by_email(self, email: str) -> bool:
        """이메일 사용 여부 확인. 저장소 오류는 그대로 전파합니다."""
        result = await self._session.execute(SELECT_EXISTS_BY_EMAIL, {"email": email})
        return bool(result.scalar())
