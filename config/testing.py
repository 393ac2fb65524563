import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker_test"),
}

LINK_SIGNING_SECRET = "STD_"
SIGNATURE_SCHEME = "sha256-prefix"
PUBLIC_BASE_URL = "http://testserver"

MESSAGE_CHANNEL_BASE = "https://wa.me"
MESSAGE_SIGNATURE = "– Mrs. Sara Atef"
DEFAULT_WEEK_NUMBER = 1

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True

AUTO_INIT_DB = False
