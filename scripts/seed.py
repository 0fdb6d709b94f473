#!/usr/bin/env python3
"""
Create the tables and load reference data into DATABASE_URL.

Run: python scripts/seed.py
     python scripts/seed.py --reset
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from api.config import SessionLocal, create_db, reset_db  # noqa: E402
from api.seed import seed_initial_data  # noqa: E402
from api.utils.logger import configure_logging  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the learning database")
    parser.add_argument("--reset", action="store_true", help="drop all tables first")
    args = parser.parse_args()

    configure_logging(console=True)
    if args.reset:
        reset_db()
    else:
        create_db()

    db = SessionLocal()
    try:
        seeded = seed_initial_data(db)
    finally:
        db.close()
    print("seeded" if seeded else "already seeded")
    return 0


if __name__ == "__main__":
    sys.exit(main())
