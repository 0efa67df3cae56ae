import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "path": os.getenv("DB_PATH", ":memory:"),
}

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports-test")

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
