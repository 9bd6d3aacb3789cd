from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.classroll.classroll.database.bootstrap import ensure_schema, list_tables
from src.classroll.classroll.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = load_settings()
    conn = DatabaseConnection(DBConfig(path=settings.DATABASE_PATH))
    try:
        ensure_schema(conn, strict=True)
        tables = list_tables(conn)
    finally:
        conn.close()

    print(f"OK: Schema ready -> {conn.path} (tables={', '.join(tables)})")


if __name__ == "__main__":
    main()
