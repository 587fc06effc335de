import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "lateness_db"),
}
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

STATIC_DIR = os.getenv("STATIC_DIR", "dist")

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
