"""Cookie Jar.

요청 단위 쿠키 저장소입니다.
요청에 실려 온 쿠키(읽기 전용)와 요청 처리 중 추가된 쿠키를 함께 관리하고,
추가된 쿠키는 응답에 Set-Cookie로 기록합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Mapping

if TYPE_CHECKING:
    from starlette.responses import Response

    from apps.auth_policy.domain.value_objects.cookie import Cookie


class CookieJar:
    """요청 단위 쿠키 저장소."""

    def __init__(self, incoming: Mapping[str, str] | None = None) -> None:
        self._incoming: dict[str, str] = dict(incoming or {})
        self._pending: dict[str, "Cookie"] = {}

    def get(self, key: str) -> str | None:
        """쿠키 값 조회. 이번 요청에서 추가된 값이 우선합니다."""
        if key in self._pending:
            return self._pending[key].value
        return self._incoming.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._pending or key in self._incoming

    def __iter__(self) -> Iterator[str]:
        yield from self._incoming
        for key in self._pending:
            if key not in self._incoming:
                yield key

    def __len__(self) -> int:
        return len(self._incoming.keys() | self._pending.keys())

    def add(self, cookie: "Cookie") -> None:
        """쿠키 추가 (같은 key는 덮어씀)."""
        self._pending[cookie.key] = cookie

    def pending(self) -> list["Cookie"]:
        """이번 요청에서 추가된 쿠키 목록."""
        return list(self._pending.values())

    def apply(self, response: "Response") -> None:
        """추가된 쿠키를 응답 헤더에 기록."""
        for cookie in self._pending.values():
            response.set_cookie(**cookie.to_set_cookie_kwargs())
