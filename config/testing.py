import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "lateness_test"),
}
DB_POOL_SIZE = 2

HOST = "127.0.0.1"
PORT = int(os.getenv("PORT", "3000"))

STATIC_DIR = os.getenv("STATIC_DIR", "dist")

BCRYPT_ROUNDS = 10
CORS_ORIGINS = "*"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
