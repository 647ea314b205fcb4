"""
services.notes

Stable import surface for note CRUD helpers. Re-exports db_notes so the
controller and UI depend on this module rather than on the SQL layer.
"""

from db_notes import (  # noqa: F401
    Note,
    count_notes,
    delete_note,
    get_all_notes,
    get_note_by_id,
    insert_note,
    update_note,
)
from db_schema import SCHEMA_VERSION, initialize_database  # noqa: F401
