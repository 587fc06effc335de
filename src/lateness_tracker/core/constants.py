"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_BCRYPT_ROUNDS = 10
BCRYPT_MAX_PASSWORD_BYTES = 72

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_POOL_SIZE = 5

API_PREFIX = "/api"
