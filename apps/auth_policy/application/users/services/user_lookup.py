"""UserLookupService - 인증 주체 조회.

인증 미들웨어와 관리자 권한 확인에서 사용합니다.

조회 실패는 사유와 관계없이 동일한 UnauthorizedError로 변환합니다.
"row 없음"과 "row 디코딩 실패"를 호출자가 구분할 수 없어야
이메일/ID 존재 여부를 탐색(enumeration)하는 데 쓰일 수 없습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.auth_policy.application.common.exceptions import (
    DataMapperError,
    GatewayError,
    UnauthorizedError,
)

if TYPE_CHECKING:
    from apps.auth_policy.application.users.ports import UsersQueryGateway
    from apps.auth_policy.domain.entities.user import User

logger = logging.getLogger(__name__)


def _mask_email(email: str) -> str:
    local, _, domain = email.partition("@")
    return f"{local[:2]}***@{domain}"


class UserLookupService:
    """사용자 조회 서비스.

    Collaborators:
        - UsersQueryGateway: 사용자 읽기
    """

    def __init__(self, user_query_gateway: "UsersQueryGateway") -> None:
        self._gateway = user_query_gateway

    async def by_email(self, email: str) -> "User":
        """이메일로 사용자 조회.

        Raises:
            UnauthorizedError: 사용자가 없거나 row가 유효하지 않거나 조회에 실패함
        """
        try:
            user = await self._gateway.get_by_email(email)
        except GatewayError as e:
            logger.info(
                "User lookup failed",
                extra={"email": _mask_email(email), "error": e.message},
            )
            reason = "invalid user" if isinstance(e, DataMapperError) else "user not found by email"
            raise UnauthorizedError(reason) from e

        if user is None:
            logger.info("User not found by email", extra={"email": _mask_email(email)})
            raise UnauthorizedError("user not found by email")
        return user

    async def by_id(self, user_id: UUID) -> "User":
        """ID로 사용자 조회.

        Raises:
            UnauthorizedError: 사용자가 없거나 row가 유효하지 않거나 조회에 실패함
        """
        try:
            user = await self._gateway.get_by_id(user_id)
        except GatewayError as e:
            logger.info(
                "User lookup failed",
                extra={"user_id": str(user_id), "error": e.message},
            )
            reason = "Invalid user" if isinstance(e, DataMapperError) else "User not found by id"
            raise UnauthorizedError(reason) from e

        if user is None:
            logger.info("User not found by id", extra={"user_id": str(user_id)})
            raise UnauthorizedError("User not found by id")
        return user

    async def is_admin(self, user: "User | UUID") -> bool:
        """관리자 여부 확인 (fail-closed).

        조회 실패(사용자 없음, 저장소 오류, 디코딩 오류)는 False로 처리하며
        예외를 던지지 않습니다.
        """
        user_id = user if isinstance(user, UUID) else user.id

        try:
            admin = await self._gateway.fetch_admin_flag(user_id)
        except Exception as e:
            logger.warning(
                "Admin check failed, denying",
                extra={"user_id": str(user_id), "error": type(e).__name__},
            )
            return False

        if admin is None:
            logger.info("Admin check for unknown user", extra={"user_id": str(user_id)})
            return False
        return admin is True

    async def user_exists(self, email: str) -> bool:
        """이메일로 가입된 사용자가 있는지 확인.

        저장소 오류는 그대로 전파합니다.
        """
        return await self._gateway.exists_by_email(email)
