import inspect_db
from db_notes import insert_note


def test_describe_lists_notes(db_path, capsys):
    insert_note("A", "B", "C", db_path)
    assert inspect_db.main([db_path, "--notes"]) == 0
    out = capsys.readouterr().out
    assert "Schema for notes:" in out
    assert "Schema version: 2" in out
    assert "Notes: 1" in out
    assert "#1 'A'" in out


def test_missing_database(tmp_path, capsys):
    assert inspect_db.main([str(tmp_path / "nope.db")]) == 1
    assert "Database not found" in capsys.readouterr().err
