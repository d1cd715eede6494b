"""Logging 테스트."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

from apps.auth_policy.setup.config import get_settings
from apps.auth_policy.setup.logging import REDACTED, RedactSensitiveFilter


class TestSetupLogging:
    """setup_logging 함수 테스트."""

    def setup_method(self) -> None:
        get_settings.cache_clear()
        self._factory = logging.getLogRecordFactory()

    def teardown_method(self) -> None:
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.WARNING)
        logging.setLogRecordFactory(self._factory)
        get_settings.cache_clear()

    def test_setup_logging_configures_root_logger(self) -> None:
        with patch.dict(os.environ, {"AUTH_LOG_LEVEL": "DEBUG"}, clear=True):
            from apps.auth_policy.setup.logging import setup_logging

            setup_logging()

            root_logger = logging.getLogger()
            assert root_logger.level == logging.DEBUG
            assert len(root_logger.handlers) == 1
            assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_setup_logging_adds_service_metadata(self) -> None:
        with patch.dict(os.environ, {"AUTH_ENVIRONMENT": "test"}, clear=True):
            from apps.auth_policy.setup.logging import setup_logging

            setup_logging("INFO")

            record = logging.getLogRecordFactory()(
                "test", logging.INFO, "test.py", 1, "message", (), None
            )
            assert record.service["environment"] == "test"


class TestRedactSensitiveFilter:
    """RedactSensitiveFilter 테스트."""

    def test_masks_token_extras(self) -> None:
        record = logging.LogRecord("test", logging.INFO, "test.py", 1, "msg", (), None)
        record.refresh_token = "secret-refresh"
        record.user_id = "u-1"

        assert RedactSensitiveFilter().filter(record) is True
        assert record.refresh_token == REDACTED
        assert record.user_id == "u-1"
