"""
inspect_db.py

Print the tables, columns, schema version and note count of a notes database.

Usage:
  python inspect_db.py                # the database the app would open
  python inspect_db.py path/to/app.db --notes

Exit codes:
  0 success
  1 database not found
"""
from __future__ import annotations

import argparse
import os
import sqlite3
import sys
from typing import List, Optional

from db_notes import count_notes, get_all_notes
from db_version import get_db_version


def _table_names(con: sqlite3.Connection) -> List[str]:
    cur = con.cursor()
    cur.execute("SELECT name FROM sqlite_master WHERE type='table' ORDER BY name")
    return [r[0] for r in cur.fetchall()]


def describe(db_path: str, show_notes: bool = False, out=None) -> None:
    out = out or sys.stdout
    con = sqlite3.connect(db_path)
    try:
        tables = _table_names(con)
        print(f"Tables: {tables}", file=out)
        for name in tables:
            print(f"\nSchema for {name}:", file=out)
            cur = con.cursor()
            cur.execute(f'PRAGMA table_info("{name}")')
            for col in cur.fetchall():
                print(f"  {col[1]} {col[2]}{' NOT NULL' if col[3] else ''}{' PRIMARY KEY' if col[5] else ''}", file=out)
    finally:
        con.close()
    print(f"\nSchema version: {get_db_version(db_path)}", file=out)
    if "notes" not in tables:
        return
    print(f"Notes: {count_notes(db_path)}", file=out)
    if show_notes:
        for note in get_all_notes(db_path):
            print(f"  #{note.id} {note.title!r} | {note.content!r} | {note.comment!r}", file=out)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect a notes database")
    parser.add_argument("db_path", nargs="?", help="Database file (defaults to the app's database)")
    parser.add_argument("--notes", action="store_true", help="List every note, most recent first")
    args = parser.parse_args(argv)

    db_path = args.db_path
    if not db_path:
        from settings_manager import resolve_db_path

        db_path = resolve_db_path()
    if not os.path.exists(db_path):
        print(f"Database not found: {db_path}", file=sys.stderr)
        return 1
    describe(db_path, show_notes=args.notes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
