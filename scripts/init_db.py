"""Create the class journal database and tables; optionally add the default accounts.

Usage: python scripts/init_db.py [--seed]
"""
from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_journal.class_journal.database.bootstrap import apply_schema, ensure_default_users, list_tables

JOURNAL_TABLES = ("students", "attendance", "users", "entries")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Apply database/schema.sql to the configured MySQL database.")
    parser.add_argument("--seed", action="store_true", help="also create the default accounts when users is empty")
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    missing = sorted(set(JOURNAL_TABLES) - set(list_tables(db_config)))
    if missing:
        print(f"FAILED: {target} is missing tables: {', '.join(missing)}", file=sys.stderr)
        return 1
    print(f"OK: journal tables ready -> {target} ({', '.join(JOURNAL_TABLES)})")

    if args.seed:
        created = ensure_default_users(db_config)
        print(f"OK: default accounts ready (created={created})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
