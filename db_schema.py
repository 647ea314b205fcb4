"""
db_schema.py
Defines the notes table and brings a database file up to the current schema version.

Upgrades are an ordered list of (target_version, step) pairs. A step receives a
cursor inside the upgrade transaction. The only step so far rebuilds the notes
table from scratch, so rows stored under an older version are discarded.
"""
import os
import sqlite3
from typing import Callable, List, Tuple

from db_version import read_user_version, write_user_version

SCHEMA_VERSION = 2

NOTES_TABLE_SQL = """
CREATE TABLE notes(
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    comment TEXT
)
"""


def create_schema(cursor: sqlite3.Cursor):
    cursor.execute(NOTES_TABLE_SQL)


def _rebuild_notes_table(cursor: sqlite3.Cursor):
    cursor.execute("DROP TABLE IF EXISTS notes")
    create_schema(cursor)


UPGRADE_STEPS: List[Tuple[int, Callable[[sqlite3.Cursor], None]]] = [
    (2, _rebuild_notes_table),
]


def pending_steps(current_version: int, target_version: int = SCHEMA_VERSION):
    """Return upgrade steps above current_version up to target_version, lowest first."""
    return [
        (version, step)
        for version, step in sorted(UPGRADE_STEPS, key=lambda s: s[0])
        if current_version < version <= target_version
    ]


def initialize_database(db_path: str) -> int:
    """Open (creating if needed) the database at db_path and return its schema version.

    A brand-new file gets the notes table and is stamped with SCHEMA_VERSION.
    An older file runs every pending upgrade step in one transaction. A file
    already at (or beyond) SCHEMA_VERSION is left alone.
    """
    parent = os.path.dirname(os.path.abspath(db_path))
    os.makedirs(parent, exist_ok=True)
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        current = read_user_version(cur)
        if current >= SCHEMA_VERSION:
            return current
        if current == 0:
            # Fresh file; an unversioned leftover table is replaced as well
            _rebuild_notes_table(cur)
        else:
            for _version, step in pending_steps(current):
                step(cur)
        write_user_version(cur, SCHEMA_VERSION)
        conn.commit()
        return SCHEMA_VERSION
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()
