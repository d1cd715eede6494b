"""PKCE code challenge (S256).

challenge = BASE64URL-NOPAD(SHA256(code_verifier))

verifier 생성과 저장은 호출자 책임입니다.
"""

from __future__ import annotations

import base64
import hashlib


def derive_pkce_code_challenge(code_verifier: str) -> str:
    """code_verifier로부터 code_challenge를 유도합니다."""
    digest = hashlib.sha256(code_verifier.encode("utf-8")).digest()
    # RFC 7636: 패딩 없음
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
