import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "path": os.getenv("DB_PATH", os.path.join("instance", "attendance.db")),
}

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
