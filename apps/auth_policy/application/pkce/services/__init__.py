"""PKCE Services."""

from apps.auth_policy.application.pkce.services.pkce import derive_pkce_code_challenge

__all__ = ["derive_pkce_code_challenge"]
