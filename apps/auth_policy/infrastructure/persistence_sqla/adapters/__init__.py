"""Infrastructure adapters implementing application ports."""

from apps.auth_policy.infrastructure.persistence_sqla.adapters.session_store_sqla import (
    SqlaSessionStore,
)
from apps.auth_policy.infrastructure.persistence_sqla.adapters.users_query_gateway_sqla import (
    SqlaUsersQueryGateway,
)

__all__ = [
    "SqlaSessionStore",
    "SqlaUsersQueryGateway",
]
