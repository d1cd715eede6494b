"""UsersQueryGateway Port.

사용자 읽기 작업을 위한 Gateway 인터페이스입니다.
"""

from typing import Protocol
from uuid import UUID

from apps.auth_policy.domain.entities.user import User


class UsersQueryGateway(Protocol):
    """사용자 Query Gateway (읽기 작업).

    구현체:
        - SqlaUsersQueryGateway (infrastructure/persistence_sqla/adapters/)
    """

    async def get_by_email(self, email: str) -> User | None:
        """이메일로 사용자 조회.

        Returns:
            사용자 엔티티 또는 None

        Raises:
            UserRowDecodeError: row를 User로 변환할 수 없음
        """
        ...

    async def get_by_id(self, user_id: UUID) -> User | None:
        """ID로 사용자 조회.

        Returns:
            사용자 엔티티 또는 None

        Raises:
            UserRowDecodeError: row를 User로 변환할 수 없음
        """
        ...

    async def fetch_admin_flag(self, user_id: UUID) -> bool | None:
        """관리자 플래그 조회.

        Returns:
            admin 컬럼 값, 사용자가 없으면 None
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """이메일 사용 여부 확인."""
        ...
