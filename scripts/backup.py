"""Backup database.

Note: uses SQLite's online backup API, so it is safe while the app is running.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.classroll.classroll.database.bootstrap import backup_to
from src.classroll.classroll.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = load_settings()
    if settings.DATABASE_PATH == ":memory:":
        raise SystemExit("Nothing to back up: DATABASE_PATH is :memory:")
    if not Path(settings.DATABASE_PATH).expanduser().exists():
        raise SystemExit(f"Database file not found: {settings.DATABASE_PATH}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"classroll_{ts}.sqlite"

    conn = DatabaseConnection(DBConfig(path=settings.DATABASE_PATH))
    try:
        backup_to(conn, str(out_file))
    finally:
        conn.close()
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
