"""Users Services."""

from apps.auth_policy.application.users.services.user_lookup import UserLookupService

__all__ = ["UserLookupService"]
