"""Redirect Validator.

로그인/OAuth 콜백 이후 따라갈 redirect 대상의 안전성을 판단합니다 (open redirect 방지).

허용 규칙:
    1. "/"로 시작하는 same-origin 상대 경로
    2. 개발 모드에서 "http://localhost"로 시작하는 URL
    3. 설정된 사이트 URL로 시작하는 URL (문자열 prefix 비교)

Note:
    3번은 파싱된 origin 비교가 아닌 문자열 prefix 비교입니다.
    "https://ex.com.attacker.io"도 "https://ex.com" 설정에서 통과합니다.
"""

from __future__ import annotations

import logging

from apps.auth_policy.application.common.exceptions import BadRequestError

logger = logging.getLogger(__name__)

LOCALHOST_PREFIX = "http://localhost"


class RedirectValidator:
    """Redirect 대상 검증기.

    Attributes:
        dev: 개발 모드 여부
        site_url: 설정된 사이트 URL (없으면 None)
    """

    def __init__(self, *, dev: bool, site_url: str | None = None) -> None:
        self._dev = dev
        self._site_url = site_url or None

    def is_valid(self, redirect: str) -> bool:
        if redirect.startswith("/"):
            return True
        if self._dev and redirect.startswith(LOCALHOST_PREFIX):
            return True
        # TODO: 설정 가능한 허용 목록(allowlist) 추가
        if self._site_url is not None:
            return redirect.startswith(self._site_url)
        return False

    def validate(self, first: str | None, second: str | None = None) -> str | None:
        """처음으로 존재하는 후보만 검증합니다.

        `first`가 존재하면 유효하지 않더라도 `second`로 대체하지 않습니다.

        Args:
            first: 우선 후보 (예: 쿼리 파라미터)
            second: `first`가 없을 때만 사용되는 후보 (예: 요청 본문)

        Returns:
            검증된 redirect 대상, 두 후보 모두 없으면 None

        Raises:
            BadRequestError: 존재하는 후보가 허용 규칙을 통과하지 못함
        """
        for candidate in (first, second):
            if candidate is None:
                continue
            if self.is_valid(candidate):
                return candidate
            logger.warning(
                "Rejected redirect target",
                extra={"redirect": candidate[:64], "dev": self._dev},
            )
            raise BadRequestError("Invalid redirect")

        return None


def validate_redirects(
    first: str | None,
    second: str | None,
    *,
    dev: bool,
    site_url: str | None = None,
) -> str | None:
    """`RedirectValidator(dev=..., site_url=...).validate(first, second)` 단축 함수."""
    return RedirectValidator(dev=dev, site_url=site_url).validate(first, second)
