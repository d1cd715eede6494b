"""Configuration."""

from apps.auth_policy.setup.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
