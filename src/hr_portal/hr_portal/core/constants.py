"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

STORAGE_KEY = "ipt_demo_v1"
AUTH_TOKEN_KEY = "auth_token"

MIN_RESET_PASSWORD_LENGTH = 6
DEFAULT_ITEM_QTY = 1

DEFAULT_PAGE = "home"
EMPTY_CELL = "—"
