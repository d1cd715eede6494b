"""Cookie Policy.

인증/리프레시/OAuth state 쿠키의 보안 속성과 삭제 정책을 정의합니다.

- HttpOnly: 항상 켜짐 (클라이언트 JS 접근 불가)
- Secure: 개발 모드가 아니면 HTTPS 전송만 허용
- SameSite: 개발 모드가 아니면 Strict (원 사이트 요청에만 포함)
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from apps.auth_policy.application.cookie.constants import (
    COOKIE_AUTH_TOKEN,
    COOKIE_OAUTH_STATE,
    COOKIE_REFRESH_TOKEN,
    RESERVED_COOKIES,
)
from apps.auth_policy.domain.value_objects.cookie import Cookie, SameSite

if TYPE_CHECKING:
    from apps.auth_policy.application.cookie.jar import CookieJar

logger = logging.getLogger(__name__)

REMOVAL_TTL = timedelta(seconds=1)


def new_cookie(key: str, value: str, ttl: timedelta, *, dev: bool) -> Cookie:
    """개발 모드 플래그에 따라 보안 속성이 정해지는 쿠키."""
    return Cookie(
        key=key,
        value=value,
        max_age=ttl,
        secure=not dev,
        same_site=SameSite.LAX if dev else SameSite.STRICT,
    )


def new_cookie_opts(
    key: str,
    value: str,
    ttl: timedelta,
    *,
    tls_only: bool,
    same_site: bool,
) -> Cookie:
    """Secure/SameSite를 호출자가 각각 지정하는 쿠키.

    Args:
        tls_only: True면 Secure
        same_site: True면 SameSite=Strict, 아니면 Lax
    """
    return Cookie(
        key=key,
        value=value,
        max_age=ttl,
        secure=tls_only,
        same_site=SameSite.STRICT if same_site else SameSite.LAX,
    )


def remove_cookie(jar: "CookieJar", key: str) -> None:
    """쿠키 삭제.

    jar에서 지우는 것만으로는 브라우저가 쿠키를 확실히 지우지 않으므로
    빈 값, 1초 TTL의 쿠키로 덮어씁니다. Secure/Strict 쿠키가 남는 경우를 줄이기 위해
    속성은 일부러 완화된 값(secure=False, SameSite=Lax)을 사용합니다.
    """
    if key not in jar:
        return
    jar.add(new_cookie(key, "", REMOVAL_TTL, dev=True))


def remove_all_cookies(jar: "CookieJar") -> None:
    """예약된 인증 쿠키를 모두 삭제."""
    for key in RESERVED_COOKIES:
        remove_cookie(jar, key)


class CookiePolicy:
    """설정의 개발 모드 플래그를 묶어 둔 쿠키 정책."""

    def __init__(
        self,
        *,
        dev: bool,
        auth_token_ttl: timedelta,
        refresh_token_ttl: timedelta,
        oauth_state_ttl: timedelta,
    ) -> None:
        self._dev = dev
        self._auth_token_ttl = auth_token_ttl
        self._refresh_token_ttl = refresh_token_ttl
        self._oauth_state_ttl = oauth_state_ttl

    @property
    def dev(self) -> bool:
        return self._dev

    def build(self, key: str, value: str, ttl: timedelta) -> Cookie:
        return new_cookie(key, value, ttl, dev=self._dev)

    def auth_token(self, value: str) -> Cookie:
        return self.build(COOKIE_AUTH_TOKEN, value, self._auth_token_ttl)

    def refresh_token(self, value: str) -> Cookie:
        return self.build(COOKIE_REFRESH_TOKEN, value, self._refresh_token_ttl)

    def oauth_state(self, value: str) -> Cookie:
        """OAuth state 쿠키.

        provider 콜백(cross-site 이동)에서도 전송되어야 하므로 항상 SameSite=Lax.
        """
        return new_cookie_opts(
            COOKIE_OAUTH_STATE,
            value,
            self._oauth_state_ttl,
            tls_only=not self._dev,
            same_site=False,
        )

    def set_session(self, jar: "CookieJar", *, auth_token: str, refresh_token: str) -> None:
        """인증/리프레시 쿠키 설정."""
        jar.add(self.auth_token(auth_token))
        jar.add(self.refresh_token(refresh_token))

    def clear(self, jar: "CookieJar") -> None:
        """로그아웃 시 쿠키 삭제."""
        remove_all_cookies(jar)
        logger.debug("Cleared auth cookies", extra={"dev": self._dev})
