import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "path": os.getenv("DB_PATH", os.path.join("instance", "attendance.db")),
}

# Directory that receives attendance_<date>.csv files
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
