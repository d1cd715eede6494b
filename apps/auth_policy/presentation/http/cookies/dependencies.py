"""Cookie Dependencies.

FastAPI Depends용 CookieJar 제공자입니다.
"""

from __future__ import annotations

import logging

from fastapi import Request

from apps.auth_policy.application.common.exceptions import InternalError
from apps.auth_policy.application.cookie.jar import CookieJar

logger = logging.getLogger(__name__)


def get_cookie_jar(request: Request) -> CookieJar:
    """현재 요청의 CookieJar.

    Raises:
        InternalError: CookieJarMiddleware가 설치되지 않음
    """
    jar = getattr(request.state, "cookie_jar", None)
    if not isinstance(jar, CookieJar):
        logger.error("Failed to get cookie jar", extra={"path": request.url.path})
        raise InternalError("cookie error")
    return jar
