"""
main.py
Entry point for the Notes application. Installs crash diagnostics, opens (and
upgrades) the notes database, and shows the main window.
"""
import os
import sys
import warnings

from PyQt5 import QtWidgets

from services.notes import initialize_database
from services.view_state import FormState, NotesController
from settings_manager import (
    get_env_db_path,
    get_form_draft,
    get_window_geometry,
    get_window_maximized,
    resolve_db_path,
    set_form_draft,
    set_last_db,
    set_window_geometry,
    set_window_maximized,
)
from ui_notes import NotesWindow

CRASH_LOG = "crash.log"
NATIVE_CRASH_LOG = "native_crash.log"


def _log_dir() -> str:
    return os.path.dirname(os.path.abspath(__file__))


def _install_global_excepthook(log_path: str):
    """Install a sys.excepthook that records the traceback, shows a critical dialog and prints it.

    Unexpected errors (including database failures raised from a button handler)
    would otherwise be lost when Qt swallows them.
    """
    import traceback as _traceback

    def _handler(exctype, value, tb):
        msg = "".join(_traceback.format_exception(exctype, value, tb))
        try:
            with open(log_path, "a", encoding="utf-8") as _f:
                _f.write("\n=== Unhandled exception ===\n")
                _f.write(msg)
        except OSError:
            pass
        try:
            if QtWidgets.QApplication.instance() is not None:
                QtWidgets.QMessageBox.critical(None, "Unexpected Error", msg)
        except Exception:
            pass
        print(msg, file=sys.stderr)

    sys.excepthook = _handler


def _enable_faulthandler(log_path: str):
    """Dump tracebacks of all threads to log_path on fatal native errors."""
    import faulthandler as _faulthandler

    try:
        f = open(log_path, "a", encoding="utf-8")
    except OSError:
        return
    # Keep a reference so the file stays open for the lifetime of the app
    globals()["_native_crash_log_file"] = f
    _faulthandler.enable(all_threads=True, file=f)


def _install_qt_message_handler(log_path: str):
    """Capture Qt warnings/errors into a log."""
    from PyQt5.QtCore import QtMsgType, qInstallMessageHandler
    import datetime as _dt

    level_map = {
        QtMsgType.QtDebugMsg: "DEBUG",
        QtMsgType.QtInfoMsg: "INFO",
        QtMsgType.QtWarningMsg: "WARNING",
        QtMsgType.QtCriticalMsg: "CRITICAL",
        QtMsgType.QtFatalMsg: "FATAL",
    }

    def _qt_handler(msg_type, context, message):
        ts = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")
        level = level_map.get(msg_type, str(msg_type))
        try:
            with open(log_path, "a", encoding="utf-8") as _f:
                _f.write(f"[{ts}] [Qt {level}] {message}\n")
                file = getattr(context, "file", None)
                line = getattr(context, "line", None)
                func = getattr(context, "function", None)
                if file or func:
                    _f.write(f"    at {file or '?'}:{line or '?'} ({func or '?'})\n")
        except OSError:
            pass

    qInstallMessageHandler(_qt_handler)


def open_notes_database(db_path: str, remember: bool = True) -> NotesController:
    """Bring the database at db_path to the current schema and build a controller over it.

    Restores any unsaved form draft from the previous session. With remember,
    the absolute path is saved as the database to reopen next time.
    """
    initialize_database(db_path)
    if remember:
        set_last_db(db_path)
    controller = NotesController(db_path)
    draft = get_form_draft()
    if draft:
        controller.restore(FormState.from_dict(draft))
    return controller


def open_configured_database() -> NotesController:
    """Open the database resolve_db_path() picks.

    A path supplied through NOTES_APP_DB applies to this run only and is not
    saved as last_db.
    """
    return open_notes_database(resolve_db_path(), remember=get_env_db_path() is None)


def _persist_draft(controller: NotesController):
    form = controller.form
    if form.is_editing or any((form.title, form.content, form.comment)):
        set_form_draft(form.to_dict())
    else:
        set_form_draft(None)


def main():
    # Suppress noisy SIP deprecation warning from PyQt5 about sipPyTypeDict
    warnings.filterwarnings("ignore", category=DeprecationWarning, message=".*sipPyTypeDict.*")
    log_dir = _log_dir()
    _install_global_excepthook(os.path.join(log_dir, CRASH_LOG))
    app = QtWidgets.QApplication(sys.argv)
    _enable_faulthandler(os.path.join(log_dir, NATIVE_CRASH_LOG))
    _install_qt_message_handler(os.path.join(log_dir, CRASH_LOG))

    try:
        controller = open_configured_database()
    except Exception as e:
        QtWidgets.QMessageBox.critical(None, "Notes", f"Failed to open database {resolve_db_path()}:\n{e}")
        sys.exit(1)

    window = NotesWindow(controller)
    geom = get_window_geometry()
    if geom and all(k in geom for k in ("x", "y", "w", "h")):
        window.setGeometry(int(geom["x"]), int(geom["y"]), int(geom["w"]), int(geom["h"]))
    if get_window_maximized():
        window.showMaximized()
    else:
        window.show()

    def _save_on_quit():
        g = window.geometry()
        set_window_geometry(g.x(), g.y(), g.width(), g.height())
        set_window_maximized(window.isMaximized())
        _persist_draft(window.controller)

    app.aboutToQuit.connect(_save_on_quit)
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
