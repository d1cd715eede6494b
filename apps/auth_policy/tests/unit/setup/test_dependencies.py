"""Dependency 제공자 테스트."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from apps.auth_policy.application.common.exceptions import BadRequestError
from apps.auth_policy.application.users.services import UserLookupService
from apps.auth_policy.infrastructure.persistence_sqla.adapters import (
    SqlaSessionStore,
    SqlaUsersQueryGateway,
)
from apps.auth_policy.setup.config import Settings
from apps.auth_policy.setup.dependencies import (
    get_cookie_policy,
    get_redirect_validator,
    get_session_store,
    get_user_lookup_service,
    get_users_query_gateway,
)


class TestPolicyDependencies:
    """설정 기반 정책 제공자 테스트."""

    def test_redirect_validator_uses_settings(self) -> None:
        settings = Settings(dev_mode=False, site_url="https://ex.com")

        validator = get_redirect_validator(settings)

        assert validator.validate("https://ex.com/home") == "https://ex.com/home"
        with pytest.raises(BadRequestError):
            validator.validate("http://localhost:3000/")

    def test_cookie_policy_uses_settings(self) -> None:
        settings = Settings(dev_mode=True, auth_token_ttl_seconds=120)

        policy = get_cookie_policy(settings)
        cookie = policy.auth_token("a")

        assert policy.dev is True
        assert cookie.secure is False
        assert cookie.max_age == timedelta(seconds=120)


class TestGatewayDependencies:
    """Gateway 제공자 테스트."""

    def test_gateways_wrap_session(self, mock_session: AsyncMock) -> None:
        assert isinstance(get_session_store(mock_session), SqlaSessionStore)
        assert isinstance(get_users_query_gateway(mock_session), SqlaUsersQueryGateway)

    def test_user_lookup_service(self, mock_session: AsyncMock) -> None:
        service = get_user_lookup_service(SqlaUsersQueryGateway(mock_session))

        assert isinstance(service, UserLookupService)
