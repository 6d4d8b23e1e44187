from __future__ import annotations

import sys
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.compensation_system.compensation_system.database.bootstrap import apply_schema, list_tables
from src.compensation_system.compensation_system.database.connection import DBConfig


def main() -> None:
    """Create the compensation tables for the APP_ENV database (safe to re-run)."""
    load_dotenv(override=False)
    settings = load_settings()
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = sorted(list_tables(db_config))
    print(f"OK: {DBConfig.from_mapping(db_config).describe()} has {len(tables)} tables: {', '.join(tables)}")


if __name__ == "__main__":
    main()
