"""
db_notes.py
Provides functions to create, update, delete and list notes in the database.
"""
import sqlite3
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Note:
    title: str
    content: str
    comment: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row) -> "Note":
        """Build a Note from an (id, title, content, comment) row."""
        note_id, title, content, comment = row
        return cls(
            id=int(note_id) if note_id is not None else None,
            title=title,
            content=content,
            comment=comment if comment is not None else "",
        )


def insert_note(title: str, content: str, comment: str, db_path: str) -> int:
    """Insert a note and return its newly assigned id."""
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            "INSERT INTO notes (title, content, comment) VALUES (?, ?, ?)",
            (title, content, comment),
        )
        conn.commit()
        return int(cur.lastrowid)
    finally:
        conn.close()


def update_note(note_id: Optional[int], title: str, content: str, comment: str, db_path: str) -> int:
    """Overwrite the note with the given id. Returns the number of rows changed (0 if none matched)."""
    if note_id is None:
        raise ValueError("Note id is required for update")
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            "UPDATE notes SET title = ?, content = ?, comment = ? WHERE id = ?",
            (title, content, comment, int(note_id)),
        )
        conn.commit()
        return cur.rowcount
    finally:
        conn.close()


def delete_note(note_id: int, db_path: str) -> int:
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute("DELETE FROM notes WHERE id = ?", (int(note_id),))
        conn.commit()
        return cur.rowcount
    finally:
        conn.close()


def get_all_notes(db_path: str) -> List[Note]:
    """Return every note, most recently inserted first."""
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute("SELECT id, title, content, comment FROM notes ORDER BY id DESC")
        return [Note.from_row(row) for row in cur.fetchall()]
    finally:
        conn.close()


def get_note_by_id(note_id: int, db_path: str) -> Optional[Note]:
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            "SELECT id, title, content, comment FROM notes WHERE id = ?",
            (int(note_id),),
        )
        row = cur.fetchone()
        return Note.from_row(row) if row else None
    finally:
        conn.close()


def count_notes(db_path: str) -> int:
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute("SELECT COUNT(*) FROM notes")
        return int(cur.fetchone()[0])
    finally:
        conn.close()
