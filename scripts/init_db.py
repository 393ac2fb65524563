"""Create the students/student_weeks tables in the configured MySQL database."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.database.bootstrap import apply_schema, list_tables
from src.attendance_tracker.attendance_tracker.database.connection import DBConfig

REQUIRED_TABLES = {"students", "student_weeks"}


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = DBConfig.from_dict(db_config)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = set(list_tables(db_config))
    missing = REQUIRED_TABLES - tables

    where = f"{target.user}@{target.host}:{target.port}/{target.database}"
    if missing:
        print(f"FAILED: {where} is missing tables: {', '.join(sorted(missing))}")
        return 1
    print(f"OK: Applied schema.sql -> {where} (tables={', '.join(sorted(tables))})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
