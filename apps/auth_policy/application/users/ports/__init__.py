"""Users Ports."""

from apps.auth_policy.application.users.ports.users_query_gateway import UsersQueryGateway

__all__ = ["UsersQueryGateway"]
