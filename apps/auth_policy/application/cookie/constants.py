"""Cookie Names.

이 레이어가 예약한 쿠키 이름입니다 (프론트엔드와 일치해야 함).
"""

COOKIE_AUTH_TOKEN = "auth_token"
COOKIE_REFRESH_TOKEN = "refresh_token"
COOKIE_OAUTH_STATE = "oauth_state"

RESERVED_COOKIES = (COOKIE_AUTH_TOKEN, COOKIE_REFRESH_TOKEN, COOKIE_OAUTH_STATE)
