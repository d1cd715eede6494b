"""Session Ports."""

from apps.auth_policy.application.session.ports.session_store import SessionStore

__all__ = ["SessionStore"]
