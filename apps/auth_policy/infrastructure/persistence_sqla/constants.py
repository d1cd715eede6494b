"""Database table constants.

스키마는 이 레이어 밖에서 관리됩니다. 여기서는 이름만 참조합니다.
"""

# =============================================================================
# Table Names
# =============================================================================
USER_TABLE = "_user"
SESSION_TABLE = "_session"
