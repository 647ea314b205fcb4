"""
db_version.py
Reads and stamps the notes database schema version using PRAGMA user_version.
"""
import sqlite3


def read_user_version(cursor: sqlite3.Cursor) -> int:
    cursor.execute("PRAGMA user_version")
    row = cursor.fetchone()
    return int(row[0]) if row else 0


def write_user_version(cursor: sqlite3.Cursor, version: int):
    # PRAGMA does not accept bound parameters
    cursor.execute(f"PRAGMA user_version = {int(version)}")


def get_db_version(db_path) -> int:
    conn = sqlite3.connect(db_path)
    try:
        return read_user_version(conn.cursor())
    finally:
        conn.close()


def set_db_version(version, db_path):
    conn = sqlite3.connect(db_path)
    try:
        write_user_version(conn.cursor(), version)
        conn.commit()
    finally:
        conn.close()
