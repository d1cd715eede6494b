"""User Row Mapping.

`SELECT * FROM _user` 결과 row를 User 엔티티로 변환합니다.
컬럼과 필드의 대응을 명시적으로 선언하고, 변환에 실패하면
"row 없음"과 구분되는 UserRowDecodeError를 발생시킵니다.

타입 규칙:
    - id: 16바이트 BLOB (UUID raw bytes), PostgreSQL UUID도 허용
    - admin/verified: BOOLEAN 또는 0/1 INTEGER (SQLite)
"""

from __future__ import annotations

from typing import Any, Callable, Mapping
from uuid import UUID

from apps.auth_policy.application.common.exceptions import UserRowDecodeError
from apps.auth_policy.domain.entities.user import User


def decode_uuid(column: str, value: Any) -> UUID:
    if isinstance(value, UUID):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        if len(raw) != 16:
            raise UserRowDecodeError(column, f"expected 16 bytes, got {len(raw)}")
        return UUID(bytes=raw)
    raise UserRowDecodeError(column, f"unexpected type {type(value).__name__}")


def decode_str(column: str, value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise UserRowDecodeError(column, "expected non-empty text")
    return value


def decode_bool(column: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    # SQLite는 BOOLEAN을 0/1 INTEGER로 저장
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise UserRowDecodeError(column, f"expected boolean, got {value!r}")


# 필드 이름 -> (컬럼 이름, 디코더)
USER_COLUMNS: dict[str, tuple[str, Callable[[str, Any], Any]]] = {
    "id": ("id", decode_uuid),
    "email": ("email", decode_str),
    "admin": ("admin", decode_bool),
    "verified": ("verified", decode_bool),
}


def map_user_row(row: Mapping[str, Any]) -> User:
    """DB row를 User로 변환.

    Raises:
        UserRowDecodeError: 컬럼 누락 또는 타입 불일치
    """
    fields: dict[str, Any] = {}
    for field, (column, decode) in USER_COLUMNS.items():
        if column not in row:
            raise UserRowDecodeError(column, "missing column")
        fields[field] = decode(column, row[column])
    return User(**fields)
