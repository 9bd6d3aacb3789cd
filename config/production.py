import os

from config.config import default_database_path, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATABASE_PATH = os.getenv("DATABASE_PATH", default_database_path())

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
STRICT_SCHEMA = env_flag("STRICT_SCHEMA", "1")
