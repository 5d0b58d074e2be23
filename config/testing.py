import os

from config.config import db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env()

# Tests never need a running MySQL server.
BACKEND = os.getenv("BACKEND", "kv")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ATTENDANCE_BUFFER_MINUTES = 15

AUTO_INIT_DB = False
AUTO_SEED_DB = False
