import os
from pathlib import Path


def default_database_path() -> str:
    """Per-user data directory, like a desktop app's userData folder."""
    base = os.environ.get("CLASSROLL_DATA_DIR") or str(Path.home() / ".classroll")
    return str(Path(base) / "database.sqlite")


def env_flag(name: str, default: str) -> bool:
    return bool(int(os.getenv(name, default)))
