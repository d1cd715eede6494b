"""SQLAlchemy Session Store.

SessionStore 포트의 구현체입니다.

트랜잭션은 호출자가 관리합니다 (commit/rollback/close 하지 않음).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import text

from apps.auth_policy.infrastructure.persistence_sqla.constants import SESSION_TABLE

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

DELETE_SESSIONS_BY_USER = text(f'DELETE FROM "{SESSION_TABLE}" WHERE "user" = :user')
DELETE_SESSION_BY_REFRESH_TOKEN = text(
    f'DELETE FROM "{SESSION_TABLE}" WHERE refresh_token = :refresh_token'
)


class SqlaSessionStore:
    """SQLAlchemy 기반 세션 저장소.

    SessionStore 구현체.
    """

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def delete_all_sessions_for_user(self, user_id: UUID) -> int:
        """사용자의 모든 세션 삭제."""
        result = await self._session.execute(
            DELETE_SESSIONS_BY_USER,
            {"user": user_id.bytes},
        )

        logger.info(
            "Sessions revoked for user",
            extra={"user_id": str(user_id), "rowcount": result.rowcount},
        )
        return result.rowcount

    async def delete_session(self, refresh_token: str) -> int:
        """refresh token으로 세션 삭제."""
        result = await self._session.execute(
            DELETE_SESSION_BY_REFRESH_TOKEN,
            {"refresh_token": refresh_token},
        )

        logger.debug("Session revoked", extra={"rowcount": result.rowcount})
        return result.rowcount
