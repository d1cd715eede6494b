"""Cookie plumbing for FastAPI."""

from apps.auth_policy.presentation.http.cookies.dependencies import get_cookie_jar
from apps.auth_policy.presentation.http.cookies.middleware import CookieJarMiddleware

__all__ = ["CookieJarMiddleware", "get_cookie_jar"]
