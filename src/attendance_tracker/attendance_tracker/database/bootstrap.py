from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

from .connection import DatabaseConnection, DBConfig

# The target database comes from DB_CONFIG, so schema.sql may name any database.
_DATABASE_SCOPED = re.compile(r"^(CREATE\s+DATABASE|USE)\b", re.IGNORECASE)


def _without_comments(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))


def schema_statements(sql: str) -> Iterator[str]:
    """Yield the table statements of a schema file in order.

    ``--`` comment lines and database-level statements are dropped. A ``;``
    inside a single-quoted literal (``''`` escapes a quote) does not end a
    statement.
    """
    start = 0
    quoted = False
    text = _without_comments(sql)
    for pos, ch in enumerate(text):
        if ch == "'":
            quoted = not quoted
        elif ch == ";" and not quoted:
            stmt = text[start:pos].strip()
            start = pos + 1
            if stmt and not _DATABASE_SCOPED.match(stmt):
                yield stmt
    tail = text[start:].strip()
    if tail and not _DATABASE_SCOPED.match(tail):
        yield tail


def _connection(db_config: dict) -> DatabaseConnection:
    # Bypass the shared singleton: bootstrap may run before the app exists.
    return DatabaseConnection(DBConfig.from_dict(db_config))


def ensure_database_exists(db_config: dict) -> None:
    factory = _connection(db_config)
    conn = factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    sql = Path(schema_path).read_text(encoding="utf-8")

    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor()
        for stmt in schema_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
