import os


def _flag(name, default):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/homestay.db")

# Session signing
SECRET_KEY = os.getenv("SECRET_KEY", "inn-hoian-secret-key")
ALGORITHM = "HS256"
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "homestay_session")
SESSION_MAX_AGE_SECONDS = int(os.getenv("SESSION_MAX_AGE_SECONDS", str(24 * 60 * 60)))
SESSION_COOKIE_SECURE = _flag("SESSION_COOKIE_SECURE", "false")
# "database" or "memory"
SESSION_BACKEND = os.getenv("SESSION_BACKEND", "database")

SEED_DATABASE = _flag("SEED_DATABASE", "true")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
