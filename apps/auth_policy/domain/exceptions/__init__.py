"""Domain Exceptions."""

from apps.auth_policy.domain.exceptions.base import DomainError
from apps.auth_policy.domain.exceptions.cookie import InvalidCookieError

__all__ = [
    "DomainError",
    "InvalidCookieError",
]
