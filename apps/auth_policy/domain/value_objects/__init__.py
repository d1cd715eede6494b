"""Domain Value Objects."""

from apps.auth_policy.domain.value_objects.cookie import COOKIE_PATH, Cookie, SameSite

__all__ = ["Cookie", "SameSite", "COOKIE_PATH"]
