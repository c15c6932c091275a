"""Application constants - centralized configuration values."""

# =============================================================================
# API Timeouts (in seconds)
# =============================================================================
HTTPX_TIMEOUT = 10.0
API_TIMEOUT_EXTERNAL = 15.0

# =============================================================================
# GraphQL
# =============================================================================
RECENT_REPOSITORIES_LIMIT = 6

# =============================================================================
# Session & Security
# =============================================================================
SESSION_TIMEOUT_DAYS = 1
SESSION_COOKIE_NAME = "warhorn_demo_session"
SESSION_ID_KEY = "sid"
SESSION_STORE_MAX_ENTRIES = 10_000

# =============================================================================
# Token Exchange
# =============================================================================
EXCHANGE_TOKEN_PATH = "/exchange_token"
GRANT_TYPE_AUTHORIZATION_CODE = "authorization_code"

# =============================================================================
# Messages
# =============================================================================
ERROR_METHOD_NOT_ALLOWED = "Method Not Allowed"
ERROR_MISSING_CODE = "Missing code"
ERROR_TOKEN_EXCHANGE_FAILED = "Token exchange failed"
ERROR_NO_ACCESS_TOKEN = "Failed to get access token"
ERROR_INVALID_STATE = "Invalid OAuth state"
ERROR_AUTHENTICATION_INTERRUPTED = "Authentication was interrupted, please try again"
