import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}

# Capability links: prefix secret + student id, SHA-256 (links minted by the old frontend stay valid)
LINK_SIGNING_SECRET = os.getenv("LINK_SIGNING_SECRET", "STD_")
SIGNATURE_SCHEME = os.getenv("SIGNATURE_SCHEME", "sha256-prefix")
# Origin used for links built outside a web request (CLI, scripts)
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:5000")

MESSAGE_CHANNEL_BASE = os.getenv("MESSAGE_CHANNEL_BASE", "https://wa.me")
MESSAGE_SIGNATURE = os.getenv("MESSAGE_SIGNATURE", "– Mrs. Sara Atef")
DEFAULT_WEEK_NUMBER = int(os.getenv("DEFAULT_WEEK_NUMBER", "1"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
