"""Schema creation, version stamping and the drop-and-recreate upgrade."""

import sqlite3

import pytest

from db_notes import get_all_notes, insert_note
from db_schema import SCHEMA_VERSION, UPGRADE_STEPS, initialize_database, pending_steps
from db_version import get_db_version, set_db_version


def _columns(db_path):
    con = sqlite3.connect(db_path)
    try:
        return {row[1]: row for row in con.execute("PRAGMA table_info(notes)")}
    finally:
        con.close()


def test_fresh_database_gets_table_and_version(tmp_path):
    path = str(tmp_path / "new.db")
    assert initialize_database(path) == SCHEMA_VERSION
    assert get_db_version(path) == SCHEMA_VERSION
    cols = _columns(path)
    assert list(cols) == ["id", "title", "content", "comment"]
    assert cols["id"][5] == 1  # primary key
    assert cols["title"][3] == 1 and cols["content"][3] == 1  # NOT NULL
    assert cols["comment"][3] == 0


def test_creates_missing_parent_directories(tmp_path):
    path = tmp_path / "a" / "b" / "app.db"
    initialize_database(str(path))
    assert path.exists()


def test_current_version_keeps_rows(db_path):
    insert_note("A", "B", "C", db_path)
    assert initialize_database(db_path) == SCHEMA_VERSION
    assert [n.title for n in get_all_notes(db_path)] == ["A"]


def test_older_version_drops_and_recreates(db_path):
    insert_note("A", "B", "C", db_path)
    set_db_version(1, db_path)
    assert initialize_database(db_path) == SCHEMA_VERSION
    assert get_all_notes(db_path) == []
    assert get_db_version(db_path) == SCHEMA_VERSION


def test_old_table_layout_is_replaced(tmp_path):
    path = str(tmp_path / "old.db")
    con = sqlite3.connect(path)
    con.execute("CREATE TABLE notes(id INTEGER PRIMARY KEY, title TEXT)")
    con.execute("INSERT INTO notes(title) VALUES ('legacy')")
    con.execute("PRAGMA user_version = 1")
    con.commit()
    con.close()

    initialize_database(path)
    assert "comment" in _columns(path)
    assert get_all_notes(path) == []


def test_newer_version_left_untouched(db_path):
    insert_note("A", "B", "C", db_path)
    set_db_version(SCHEMA_VERSION + 1, db_path)
    assert initialize_database(db_path) == SCHEMA_VERSION + 1
    assert len(get_all_notes(db_path)) == 1


def test_pending_steps_are_ordered_and_bounded():
    assert [v for v, _ in pending_steps(0)] == sorted(v for v, _ in UPGRADE_STEPS)
    assert pending_steps(SCHEMA_VERSION) == []


def test_unwritable_location_fails(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    with pytest.raises((OSError, sqlite3.Error)):
        initialize_database(str(blocker / "app.db"))
