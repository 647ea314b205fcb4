"""
ui_notes.py
Main notes window: a Title/Content/Comment form, Save/Update and Clear buttons,
and the list of notes (most recent first) with a Delete button per entry.

The window keeps no state of its own. Every user action is forwarded to the
NotesController and followed by refresh_view(), which rebuilds the widgets from the
controller's form and cached list.
"""

from typing import Optional

from PyQt5 import QtWidgets
from PyQt5.QtCore import Qt, QTimer, pyqtSignal

from services.notes import Note
from services.view_state import NotesController, SubmitResult

NOTE_ID_ROLE = 1000  # list item data role holding the note id


class NoteItemWidget(QtWidgets.QWidget):
    """One row of the notes list: title, content, comment and a Delete button."""

    deleteRequested = pyqtSignal(int)

    def __init__(self, note: Note, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        self.note = note
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(4, 8, 4, 8)

        header = QtWidgets.QHBoxLayout()
        title = QtWidgets.QLabel(note.title)
        title.setObjectName("noteTitle")
        font = title.font()
        font.setBold(True)
        title.setFont(font)
        header.addWidget(title, 1)
        self.delete_button = None
        if note.id is not None:
            self.delete_button = QtWidgets.QPushButton("Delete")
            self.delete_button.setObjectName("deleteButton")
            self.delete_button.setFlat(True)
            self.delete_button.clicked.connect(lambda: self.deleteRequested.emit(int(note.id)))
            header.addWidget(self.delete_button, 0, Qt.AlignRight)
        layout.addLayout(header)

        content = QtWidgets.QLabel(note.content)
        content.setObjectName("noteContent")
        content.setWordWrap(True)
        layout.addWidget(content)

        comment = QtWidgets.QLabel(note.comment)
        comment.setObjectName("noteComment")
        comment.setWordWrap(True)
        layout.addWidget(comment)


class NotesWindow(QtWidgets.QMainWindow):
    def __init__(self, controller: NotesController, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self._rendering = False
        self._build()
        self.refresh_view()

    def _build(self):
        central = QtWidgets.QWidget(self)
        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)

        self.header_label = QtWidgets.QLabel(central)
        self.header_label.setObjectName("headerLabel")
        font = self.header_label.font()
        font.setPointSize(font.pointSize() + 4)
        self.header_label.setFont(font)
        layout.addWidget(self.header_label)

        self.title_edit = self._add_field(layout, "titleEdit", "Title", "title")
        self.content_edit = self._add_field(layout, "contentEdit", "Content", "content")
        self.comment_edit = self._add_field(layout, "commentEdit", "Comment", "comment")

        buttons = QtWidgets.QHBoxLayout()
        self.save_button = QtWidgets.QPushButton(central)
        self.save_button.setObjectName("saveButton")
        self.save_button.clicked.connect(self.on_submit)
        buttons.addWidget(self.save_button)
        self.clear_button = QtWidgets.QPushButton("Clear", central)
        self.clear_button.setObjectName("clearButton")
        self.clear_button.clicked.connect(self.on_clear)
        buttons.addWidget(self.clear_button)
        buttons.addStretch(1)
        layout.addLayout(buttons)

        line = QtWidgets.QFrame(central)
        line.setFrameShape(QtWidgets.QFrame.HLine)
        line.setFrameShadow(QtWidgets.QFrame.Sunken)
        layout.addWidget(line)

        self.notes_list = QtWidgets.QListWidget(central)
        self.notes_list.setObjectName("notesList")
        self.notes_list.itemClicked.connect(
            lambda item: QTimer.singleShot(0, lambda nid=item.data(NOTE_ID_ROLE): self.select_note_id(nid))
        )
        layout.addWidget(self.notes_list, 1)

        self.setCentralWidget(central)
        self.resize(480, 720)

    def _add_field(self, layout, object_name: str, label: str, field: str) -> QtWidgets.QLineEdit:
        edit = QtWidgets.QLineEdit(self)
        edit.setObjectName(object_name)
        edit.setPlaceholderText(label)
        edit.textChanged.connect(lambda text, f=field: self._on_text_changed(f, text))
        layout.addWidget(edit)
        return edit

    # --- Rendering ---
    def refresh_view(self):
        """Rebuild every widget from the controller state."""
        c = self.controller
        self._rendering = True
        try:
            for edit, value in (
                (self.title_edit, c.form.title),
                (self.content_edit, c.form.content),
                (self.comment_edit, c.form.comment),
            ):
                if edit.text() != value:
                    edit.setText(value)
            self.header_label.setText(c.header_text)
            self.setWindowTitle(c.header_text)
            self.save_button.setText(c.submit_label)
            self._render_list()
        finally:
            self._rendering = False

    def _render_list(self):
        self.notes_list.clear()
        for note in self.controller.notes:
            item = QtWidgets.QListWidgetItem()
            item.setData(NOTE_ID_ROLE, note.id)
            row = NoteItemWidget(note, self.notes_list)
            # The list is rebuilt on delete; let the button's click finish first
            row.deleteRequested.connect(
                lambda note_id: QTimer.singleShot(0, lambda: self.on_delete(note_id))
            )
            item.setSizeHint(row.sizeHint())
            self.notes_list.addItem(item)
            self.notes_list.setItemWidget(item, row)

    # --- User intents ---
    def _on_text_changed(self, field: str, text: str):
        if self._rendering:
            return
        self.controller.set_field(field, text)

    def on_submit(self) -> SubmitResult:
        result = self.controller.submit()
        if result is not SubmitResult.SKIPPED:
            self.refresh_view()
        return result

    def on_clear(self):
        self.controller.clear()
        self.refresh_view()

    def select_note_id(self, note_id: int):
        for note in self.controller.notes:
            if note.id == note_id:
                self.controller.select(note)
                self.refresh_view()
                return

    def on_delete(self, note_id: int) -> int:
        rows = self.controller.delete(int(note_id))
        self.refresh_view()
        return rows
