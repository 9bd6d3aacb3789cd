import os

from config.config import default_database_path, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DATABASE_PATH = os.getenv("DATABASE_PATH", default_database_path())

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Ensure tables on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: wipe and fill the database with demo data on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
# Abort startup when the schema cannot be created instead of running degraded
STRICT_SCHEMA = env_flag("STRICT_SCHEMA", "0")
