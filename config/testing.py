import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "confession_attendance_test"),
}

DEFAULT_TIMEZONE = "America/New_York"
GOOGLE_SERVICE_ACCOUNT_FILE = ""

EMAIL_BACKEND = "console"
EMAIL_FROM = "Confession Attendance <no-reply@example.com>"

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True

AUTO_INIT_DB = False
