"""Settings 테스트."""

from __future__ import annotations

import os
from datetime import timedelta
from unittest.mock import patch

from apps.auth_policy.setup.config import Settings, get_settings


class TestSettings:
    """Settings 테스트."""

    def setup_method(self) -> None:
        get_settings.cache_clear()

    def teardown_method(self) -> None:
        get_settings.cache_clear()

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.dev_mode is False
        assert settings.site_url is None
        assert settings.auth_token_ttl == timedelta(hours=1)
        assert settings.refresh_token_ttl == timedelta(days=30)
        assert settings.oauth_state_ttl == timedelta(minutes=10)

    def test_env_prefix(self) -> None:
        env_vars = {
            "AUTH_SITE_URL": "https://ex.com",
            "AUTH_DEV_MODE": "true",
            "AUTH_AUTH_TOKEN_TTL_SECONDS": "60",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            settings = Settings()

        assert settings.site_url == "https://ex.com"
        assert settings.dev_mode is True
        assert settings.auth_token_ttl == timedelta(seconds=60)

    def test_unprefixed_dev_mode_alias(self) -> None:
        with patch.dict(os.environ, {"DEV_MODE": "1"}, clear=True):
            assert Settings().dev_mode is True

    def test_blank_site_url_is_none(self) -> None:
        with patch.dict(os.environ, {"AUTH_SITE_URL": "   "}, clear=True):
            assert Settings().site_url is None

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
