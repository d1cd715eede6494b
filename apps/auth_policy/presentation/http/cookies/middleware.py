"""Cookie Jar Middleware.

요청마다 CookieJar를 만들어 `request.state.cookie_jar`에 두고,
응답 시 jar에 추가된 쿠키를 Set-Cookie 헤더로 기록합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from apps.auth_policy.application.cookie.jar import CookieJar

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response


class CookieJarMiddleware(BaseHTTPMiddleware):
    """요청 단위 CookieJar 관리 미들웨어."""

    async def dispatch(self, request: "Request", call_next: "RequestResponseEndpoint") -> "Response":
        jar = CookieJar(request.cookies)
        request.state.cookie_jar = jar

        response = await call_next(request)

        jar.apply(response)
        return response
