"""SQLAlchemy Persistence Layer."""

from apps.auth_policy.infrastructure.persistence_sqla.session import (
    get_async_engine,
    get_async_session,
)

__all__ = ["get_async_session", "get_async_engine"]
