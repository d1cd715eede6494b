"""SQLAlchemy Async Session Management.

엔진과 세션 팩토리는 프로세스당 한 번 생성합니다.
세션은 요청 단위로 호출자에게 제공되며, 이 레이어의 Gateway는 세션을 닫거나 커밋하지 않습니다.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.auth_policy.setup.config import get_settings


def get_async_engine() -> AsyncEngine:
    """AsyncEngine 생성.

    환경변수:
        - AUTH_DATABASE_URL: 연결 URL
        - AUTH_DB_POOL_SIZE: 풀 크기 (기본: 5)
        - AUTH_DB_MAX_OVERFLOW: 최대 오버플로우 (기본: 10)
    """
    settings = get_settings()
    if not settings.database_url:
        raise ValueError("AUTH_DATABASE_URL environment variable is required")

    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=True,
        echo=settings.db_echo,
    )


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _get_session_factory() -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 싱글톤."""
    global _engine, _session_factory
    if _session_factory is None:
        _engine = get_async_engine()
        _session_factory = async_sessionmaker(
            _engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI Depends용 세션 제공자.

    요청이 정상 종료되면 커밋하고, 예외가 나면 롤백합니다.
    """
    session_factory = _get_session_factory()
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
