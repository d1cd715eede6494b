"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
인증 핸들러는 여기의 제공자를 통해 정책 컴포넌트를 받습니다.
"""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.auth_policy.application.cookie.services import CookiePolicy
from apps.auth_policy.application.redirect.services import RedirectValidator
from apps.auth_policy.application.users.services import UserLookupService
from apps.auth_policy.infrastructure.persistence_sqla.adapters import (
    SqlaSessionStore,
    SqlaUsersQueryGateway,
)
from apps.auth_policy.setup.config import Settings, get_settings

# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """DB 세션 제공자."""
    from apps.auth_policy.infrastructure.persistence_sqla.session import get_async_session

    async for session in get_async_session():
        yield session


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


def get_session_store(
    session: AsyncSession = Depends(get_db_session),
) -> SqlaSessionStore:
    """SessionStore 제공자."""
    return SqlaSessionStore(session)


def get_users_query_gateway(
    session: AsyncSession = Depends(get_db_session),
) -> SqlaUsersQueryGateway:
    """UsersQueryGateway 제공자."""
    return SqlaUsersQueryGateway(session)


# ============================================================
# Policy Dependencies
# ============================================================


def get_redirect_validator(
    settings: Settings = Depends(get_settings),
) -> RedirectValidator:
    """RedirectValidator 제공자."""
    return RedirectValidator(dev=settings.dev_mode, site_url=settings.site_url)


def get_cookie_policy(
    settings: Settings = Depends(get_settings),
) -> CookiePolicy:
    """CookiePolicy 제공자."""
    return CookiePolicy(
        dev=settings.dev_mode,
        auth_token_ttl=settings.auth_token_ttl,
        refresh_token_ttl=settings.refresh_token_ttl,
        oauth_state_ttl=settings.oauth_state_ttl,
    )


def get_user_lookup_service(
    gateway: SqlaUsersQueryGateway = Depends(get_users_query_gateway),
) -> UserLookupService:
    """UserLookupService 제공자."""
    return UserLookupService(user_query_gateway=gateway)
