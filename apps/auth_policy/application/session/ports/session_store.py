"""SessionStore Port.

영속화된 세션 폐기를 위한 Gateway 인터페이스입니다.
"""

from typing import Protocol
from uuid import UUID


class SessionStore(Protocol):
    """세션 저장소 인터페이스.

    구현체:
        - SqlaSessionStore (infrastructure/persistence_sqla/adapters/)

    두 연산 모두 멱등적인 key 기반 삭제입니다.
    저장소 오류는 감싸지 않고 그대로 전파합니다.
    """

    async def delete_all_sessions_for_user(self, user_id: UUID) -> int:
        """사용자의 모든 세션 삭제.

        Args:
            user_id: 사용자 ID

        Returns:
            삭제된 세션 수 (없으면 0)
        """
        ...

    async def delete_session(self, refresh_token: str) -> int:
        """refresh token으로 세션 하나 삭제.

        Args:
            refresh_token: 세션 key

        Returns:
            삭제된 세션 수 (모르는 토큰이면 0)
        """
        ...
