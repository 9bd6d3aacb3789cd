import os

from config.config import env_flag

SECRET_KEY = "test-secret"

DATABASE_PATH = os.getenv("DATABASE_PATH", ":memory:")

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
STRICT_SCHEMA = env_flag("STRICT_SCHEMA", "1")
