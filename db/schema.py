from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create tables and indexes (idempotent)."""
    cur = conn.cursor()

    # Companies table; position keeps the address book order
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS companies (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  position INTEGER NOT NULL,\n"
            "  name TEXT NOT NULL,\n"
            "  phone TEXT,\n"
            "  email TEXT,\n"
            "  role TEXT NOT NULL,\n"
            "  deadline TEXT NOT NULL,\n"
            "  status TEXT NOT NULL,\n"
            "  recruiter_name TEXT NOT NULL,\n"
            "  tags_json TEXT NOT NULL DEFAULT '[]'\n"
            ")"
        )
    )
    cur.execute("CREATE UNIQUE INDEX IF NOT EXISTS idx_companies_name ON companies(name COLLATE NOCASE);")

    # View state: active filter and currently viewed company
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS view_state (\n"
            "  key TEXT PRIMARY KEY,\n"
            "  value TEXT\n"
            ")"
        )
    )
    conn.commit()
