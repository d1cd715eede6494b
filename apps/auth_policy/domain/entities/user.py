"""User Entity.

인증 주체의 읽기 전용 뷰입니다.
이 레이어가 사용하지 않는 나머지 컬럼(비밀번호 해시 등)은 포함하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class User:
    """사용자 엔티티.

    Attributes:
        id: 사용자 고유 식별자
        email: 로그인 이메일
        admin: 관리자 여부
        verified: 이메일 인증 여부
    """

    id: UUID
    email: str
    admin: bool = False
    verified: bool = False

    def __repr__(self) -> str:
        local, _, domain = self.email.partition("@")
        return f"User(id={self.id}, email={local[:2]}***@{domain}, admin={self.admin})"
