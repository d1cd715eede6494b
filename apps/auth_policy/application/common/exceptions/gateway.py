"""Gateway Exceptions."""

from __future__ import annotations

from apps.auth_policy.application.common.exceptions.base import ApplicationError


class GatewayError(ApplicationError):
    """영속성 Gateway 기본 예외."""

    def __init__(self, reason: str = "Gateway error") -> None:
        super().__init__(reason)


class DataMapperError(GatewayError):
    """DB row를 도메인 객체로 변환하지 못함."""

    def __init__(self, reason: str = "Data mapping failed") -> None:
        super().__init__(reason)


class UserRowDecodeError(DataMapperError):
    """사용자 row 디코딩 실패.

    "row 없음"과 구분되는 오류입니다.
    """

    def __init__(self, column: str, reason: str) -> None:
        self.column = column
        super().__init__(f"Cannot decode user column '{column}': {reason}")
