"""Cookie Value Object.

세션 식별 쿠키의 보안 속성을 표현합니다.
클라이언트 JS에서 접근할 수 없도록 HttpOnly는 항상 켜져 있습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any

from apps.auth_policy.domain.exceptions.cookie import InvalidCookieError

COOKIE_PATH = "/"


class SameSite(str, Enum):
    """SameSite 속성.

    Starlette `set_cookie`가 받는 소문자 값을 그대로 사용합니다.
    """

    STRICT = "strict"
    LAX = "lax"


@dataclass(frozen=True, slots=True)
class Cookie:
    """세션 쿠키.

    Attributes:
        key: 쿠키 이름
        value: 쿠키 값
        max_age: 유효 기간
        secure: HTTPS 전송만 허용 여부
        same_site: SameSite 정책
        http_only: 항상 True
        path: 항상 "/"
    """

    key: str
    value: str
    max_age: timedelta
    secure: bool
    same_site: SameSite
    http_only: bool = True
    path: str = COOKIE_PATH

    def __post_init__(self) -> None:
        if not self.http_only:
            raise InvalidCookieError("Cookies must not be readable from client-side scripts")
        if not self.key:
            raise InvalidCookieError("Cookie key cannot be empty")

    @property
    def max_age_seconds(self) -> int:
        return int(self.max_age.total_seconds())

    def to_set_cookie_kwargs(self) -> dict[str, Any]:
        """Starlette `Response.set_cookie` 파라미터로 변환."""
        return {
            "key": self.key,
            "value": self.value,
            "max_age": self.max_age_seconds,
            "path": self.path,
            "secure": self.secure,
            "httponly": self.http_only,
            "samesite": self.same_site.value,
        }

    def __repr__(self) -> str:
        # 토큰 값은 로그에 남기지 않음
        return (
            f"Cookie(key={self.key!r}, max_age={self.max_age_seconds}s, "
            f"secure={self.secure}, same_site={self.same_site.value})"
        )
