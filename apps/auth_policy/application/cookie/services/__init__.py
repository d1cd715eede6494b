"""Cookie Services."""

from apps.auth_policy.application.cookie.services.cookie_policy import (
    CookiePolicy,
    new_cookie,
    new_cookie_opts,
    remove_all_cookies,
    remove_cookie,
)

__all__ = [
    "CookiePolicy",
    "new_cookie",
    "new_cookie_opts",
    "remove_cookie",
    "remove_all_cookies",
]
