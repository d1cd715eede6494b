"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.
토큰/쿠키 값이 extra로 섞여 들어와도 로그에 남지 않도록 마스킹합니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from apps.auth_policy.setup.config import get_settings

SENSITIVE_KEYS = frozenset(
    {
        "auth_token",
        "refresh_token",
        "oauth_state",
        "code_verifier",
        "password",
    }
)
REDACTED = "***"


class RedactSensitiveFilter(logging.Filter):
    """LogRecord의 민감한 extra 필드를 마스킹."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key in SENSITIVE_KEYS:
            if getattr(record, key, None):
                setattr(record, key, REDACTED)
        return True


def setup_logging(level: str | None = None) -> None:
    """로깅 설정."""
    settings = get_settings()

    # ECS JSON 포맷터
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())
    handler.addFilter(RedactSensitiveFilter())

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel((level or settings.log_level).upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 추가
    old_factory = logging.getLogRecordFactory()

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = old_factory(*args, **kwargs)
        record.service = {
            "name": settings.app_name,
            "environment": settings.environment,
        }
        return record

    logging.setLogRecordFactory(record_factory)

    # SQLAlchemy 로깅 레벨 조정
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
