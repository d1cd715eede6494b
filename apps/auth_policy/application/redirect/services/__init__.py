"""Redirect Services."""

from apps.auth_policy.application.redirect.services.redirect_validator import (
    RedirectValidator,
    validate_redirects,
)

__all__ = ["RedirectValidator", "validate_redirects"]
