"""Row Mappings."""

from apps.auth_policy.infrastructure.persistence_sqla.mappings.user_row import (
    USER_COLUMNS,
    decode_bool,
    map_user_row,
)

__all__ = ["USER_COLUMNS", "decode_bool", "map_user_row"]
