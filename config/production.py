import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}

# No fallback: SignatureService refuses to start without a secret
LINK_SIGNING_SECRET = os.getenv("LINK_SIGNING_SECRET", "")
SIGNATURE_SCHEME = os.getenv("SIGNATURE_SCHEME", "sha256-prefix")
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "https://attendance.example.com")

MESSAGE_CHANNEL_BASE = os.getenv("MESSAGE_CHANNEL_BASE", "https://wa.me")
MESSAGE_SIGNATURE = os.getenv("MESSAGE_SIGNATURE", "– Mrs. Sara Atef")
DEFAULT_WEEK_NUMBER = int(os.getenv("DEFAULT_WEEK_NUMBER", "1"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
