#!/usr/bin/env python3
"""
Load the catalog fixture into the SQL backend.

Usage:
  DATABASE_URL=postgresql+psycopg://... python scripts/seed_database.py [--reset]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# make the pokehunter package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pokehunter.db.create_tables import create_all  # noqa: E402
from pokehunter.repositories.seed_data import load_seed  # noqa: E402
from pokehunter.repositories.sql_repository import SQLRepository  # noqa: E402

logger = logging.getLogger("seed_database")


def seed(reset: bool = False) -> SQLRepository:
    create_all()
    repo = SQLRepository()
    if reset:
        logger.info("Clearing existing catalog rows")
        repo.clear_all()
    load_seed(repo)
    return repo


def main() -> None:
    ap = argparse.ArgumentParser(description="Load the catalog fixture into DATABASE_URL")
    ap.add_argument("--reset", action="store_true", help="delete every existing row first")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    repo = seed(reset=args.reset)
    print("OK: database seeded")
    print(f"  Product types: {len(repo.get_product_types())}")
    print(f"  Collections: {len(repo.get_collections())}")
    print(f"  Products: {len(repo.get_products())}")
    print(f"  Articles: {len(repo.get_articles())}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
