"""Domain Entities."""

from apps.auth_policy.domain.entities.user import User

__all__ = ["User"]
