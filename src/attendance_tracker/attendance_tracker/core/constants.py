"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_WEEK_NUMBER = 1
DEFAULT_PUBLIC_BASE_URL = "http://localhost:5000"
DEFAULT_CHANNEL_BASE = "https://wa.me"
DEFAULT_MESSAGE_SIGNATURE = "– Mrs. Sara Atef"

STUDENT_INFO_PATH = "/student-info"

PHONE_DIGITS = 11
PHONE_PREFIX = "01"
PHONE_COUNTRY_CODE = "20"
