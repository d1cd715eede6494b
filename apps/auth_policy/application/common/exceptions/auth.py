"""Authentication Policy Exceptions.

HTTP 상태 코드 매핑은 이 레이어의 책임이 아닙니다.
호출하는 핸들러가 예외 종류에 따라 결정합니다.
"""

from __future__ import annotations

from apps.auth_policy.application.common.exceptions.base import ApplicationError

REDACTED_MESSAGE = "Unauthorized"


class BadRequestError(ApplicationError):
    """클라이언트 입력이 정책을 위반함 (예: 허용되지 않은 redirect)."""

    def __init__(self, reason: str = "Bad request") -> None:
        super().__init__(reason)


class UnauthorizedError(ApplicationError):
    """인증 실패.

    조회 실패 사유(미존재/디코딩 실패)는 `reason`에만 남기고,
    외부로 노출되는 `message`는 항상 동일합니다.
    이메일/ID 존재 여부를 유추할 수 없도록 하기 위함입니다.
    """

    def __init__(self, reason: str = "Unauthorized") -> None:
        self.reason = reason
        super().__init__(REDACTED_MESSAGE)


class InternalError(ApplicationError):
    """사용자 입력과 무관한 인프라 오류."""

    def __init__(self, reason: str = "Internal error") -> None:
        super().__init__(reason)
