"""Cookie Value Object 테스트."""

from datetime import timedelta

import pytest

from apps.auth_policy.domain.exceptions import InvalidCookieError
from apps.auth_policy.domain.value_objects import Cookie, SameSite


class TestCookie:
    """Cookie 테스트."""

    def test_defaults_are_http_only_root_path(self) -> None:
        cookie = Cookie(
            key="auth_token",
            value="abc",
            max_age=timedelta(hours=1),
            secure=True,
            same_site=SameSite.STRICT,
        )

        assert cookie.http_only is True
        assert cookie.path == "/"
        assert cookie.max_age_seconds == 3600

    def test_script_readable_cookie_rejected(self) -> None:
        with pytest.raises(InvalidCookieError):
            Cookie(
                key="auth_token",
                value="abc",
                max_age=timedelta(hours=1),
                secure=True,
                same_site=SameSite.STRICT,
                http_only=False,
            )

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(InvalidCookieError):
            Cookie(
                key="",
                value="abc",
                max_age=timedelta(seconds=1),
                secure=False,
                same_site=SameSite.LAX,
            )

    def test_to_set_cookie_kwargs(self) -> None:
        cookie = Cookie(
            key="refresh_token",
            value="r-123",
            max_age=timedelta(days=1),
            secure=False,
            same_site=SameSite.LAX,
        )

        assert cookie.to_set_cookie_kwargs() == {
            "key": "refresh_token",
            "value": "r-123",
            "max_age": 86400,
            "path": "/",
            "secure": False,
            "httponly": True,
            "samesite": "lax",
        }

    def test_repr_hides_value(self) -> None:
        cookie = Cookie(
            key="auth_token",
            value="super-secret-token",
            max_age=timedelta(minutes=5),
            secure=True,
            same_site=SameSite.STRICT,
        )

        assert "super-secret-token" not in repr(cookie)
