from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.classroll.classroll.database.connection import DatabaseConnection, DBConfig
from src.classroll.classroll.seed.seeder import seed_database


def main() -> None:
    parser = argparse.ArgumentParser(description="Wipe the database and load demo data.")
    parser.add_argument("--yes", action="store_true", help="confirm that all existing data is dropped")
    parser.add_argument("--random-seed", type=int, default=None)
    args = parser.parse_args()

    settings = load_settings()
    if not args.yes:
        raise SystemExit(f"Refusing to wipe {settings.DATABASE_PATH}; re-run with --yes")

    conn = DatabaseConnection(DBConfig(path=settings.DATABASE_PATH))
    try:
        summary = seed_database(conn, rng=random.Random(args.random_seed))
    finally:
        conn.close()

    print(
        f"OK: Seeded database -> {conn.path} "
        f"(sections={summary.sections}, students={summary.students}, attendance={summary.attendance})"
    )


if __name__ == "__main__":
    main()
