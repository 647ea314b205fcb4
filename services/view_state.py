"""
services.view_state

View-state controller for the notes window. Holds the form fields, the id of
the note being edited (if any) and the list last fetched from the database.

Contract:
- Every mutation (insert, update, delete) is followed by a full re-fetch.
- A submit with any field empty after trimming is skipped: no database call,
  the cached list stays as it was, and SubmitResult.SKIPPED is returned.
- Updates or deletes that match no row are not errors; the row count is
  reported back and otherwise ignored.
"""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, replace
from typing import List, Optional

from services import notes as notes_service
from services.notes import Note

FORM_FIELDS = ("title", "content", "comment")


class SubmitResult(enum.Enum):
    INSERTED = "inserted"
    UPDATED = "updated"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class FormState:
    title: str = ""
    content: str = ""
    comment: str = ""
    editing_id: Optional[int] = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def trimmed(self):
        """Return (title, content, comment) with surrounding whitespace removed."""
        return (self.title.strip(), self.content.strip(), self.comment.strip())

    def is_complete(self) -> bool:
        return all(self.trimmed())

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data) -> "FormState":
        """Build a FormState from a settings dict, ignoring missing or malformed values."""
        if not isinstance(data, dict):
            return cls()
        values = {}
        for name in FORM_FIELDS:
            val = data.get(name)
            values[name] = val if isinstance(val, str) else ""
        editing_id = data.get("editing_id")
        try:
            editing_id = int(editing_id) if editing_id is not None else None
        except (TypeError, ValueError):
            editing_id = None
        return cls(editing_id=editing_id, **values)


class NotesController:
    def __init__(self, db_path: str, store=notes_service):
        self.db_path = db_path
        self._store = store
        self.form = FormState()
        self.notes: List[Note] = []
        self.last_rows_affected: Optional[int] = None
        self.refresh()

    # --- Derived labels ---
    @property
    def header_text(self) -> str:
        if self.form.is_editing:
            return f"Editing #{self.form.editing_id}"
        return "Notes"

    @property
    def submit_label(self) -> str:
        return "Update" if self.form.is_editing else "Save"

    # --- Transitions ---
    def refresh(self) -> List[Note]:
        self.notes = self._store.get_all_notes(self.db_path)
        return self.notes

    def set_field(self, name: str, value: str):
        if name not in FORM_FIELDS:
            raise KeyError(name)
        self.form = replace(self.form, **{name: value or ""})

    def select(self, note: Note):
        self.form = FormState(
            title=note.title,
            content=note.content,
            comment=note.comment,
            editing_id=note.id,
        )

    def clear(self):
        self.form = FormState()

    def submit(self) -> SubmitResult:
        if not self.form.is_complete():
            return SubmitResult.SKIPPED
        title, content, comment = self.form.trimmed()
        if self.form.is_editing:
            self.last_rows_affected = self._store.update_note(
                self.form.editing_id, title, content, comment, self.db_path
            )
            result = SubmitResult.UPDATED
        else:
            self._store.insert_note(title, content, comment, self.db_path)
            self.last_rows_affected = 1
            result = SubmitResult.INSERTED
        self.refresh()
        self.clear()
        return result

    def delete(self, note_id: int) -> int:
        rows = self._store.delete_note(note_id, self.db_path)
        self.last_rows_affected = rows
        self.refresh()
        if self.form.editing_id == note_id:
            self.clear()
        return rows

    def restore(self, form: FormState):
        """Install a saved draft. An editing id that is no longer listed turns the draft into a new note."""
        known_ids = {n.id for n in self.notes}
        if form.editing_id is not None and form.editing_id not in known_ids:
            form = replace(form, editing_id=None)
        self.form = form
