"""Cookie Exceptions."""

from apps.auth_policy.domain.exceptions.base import DomainError


class InvalidCookieError(DomainError):
    """보안 속성을 위반하는 쿠키."""

    def __init__(self, reason: str = "Invalid cookie") -> None:
        super().__init__(reason)
