"""
settings_manager.py
Manages loading and saving application settings (database location, window
geometry, unsaved form draft) in a JSON file.
"""

import json
import os
import sys

# Settings live in a per-user configuration directory, next to the default
# notes database (app.db):
#
# Windows: %LOCALAPPDATA%/NotesApp/settings.json
# macOS:   ~/Library/Application Support/NotesApp/settings.json
# Linux/other: ~/.config/NotesApp/settings.json

APP_DIR_NAME = "NotesApp"
DEFAULT_DB_BASENAME = "app.db"
DB_PATH_ENV = "NOTES_APP_DB"

_SETTINGS_BASENAME = "settings.json"


def _default_settings_dir() -> str:
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.path.expanduser("~")
        return os.path.join(base, APP_DIR_NAME)
    elif sys.platform == "darwin":
        return os.path.join(os.path.expanduser("~"), "Library", "Application Support", APP_DIR_NAME)
    else:
        return os.path.join(os.path.expanduser("~"), ".config", APP_DIR_NAME)


def get_settings_dir() -> str:
    """Return the settings directory, creating it if needed."""
    d = _default_settings_dir()
    try:
        os.makedirs(d, exist_ok=True)
    except OSError:
        pass
    return d


def _settings_path() -> str:
    return os.path.join(get_settings_dir(), _SETTINGS_BASENAME)


def load_settings():
    path = _settings_path()
    try:
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                if isinstance(data, dict):
                    return data
    except (OSError, ValueError):
        pass
    return {}


def save_settings(settings):
    path = _settings_path()
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2)
    except OSError:
        pass


# --- Database location ---
def get_last_db():
    return load_settings().get("last_db")


def set_last_db(db_path):
    settings = load_settings()
    settings["last_db"] = os.path.abspath(db_path)
    save_settings(settings)


def get_default_db_path() -> str:
    """Application-private database file next to the settings."""
    return os.path.join(get_settings_dir(), DEFAULT_DB_BASENAME)


def get_env_db_path():
    """Database path from the NOTES_APP_DB environment variable, or None."""
    env_path = (os.environ.get(DB_PATH_ENV) or "").strip()
    return env_path or None


def resolve_db_path() -> str:
    """Database to open: NOTES_APP_DB env var, then last_db setting, then the default."""
    env_path = get_env_db_path()
    if env_path:
        return env_path
    last = get_last_db()
    if isinstance(last, str) and last:
        return last
    return get_default_db_path()


# --- Unsaved form draft ---
def get_form_draft():
    """Return the saved form draft dict (title, content, comment, editing_id) or None."""
    draft = load_settings().get("form_draft")
    return draft if isinstance(draft, dict) else None


def set_form_draft(draft):
    s = load_settings()
    if draft:
        s["form_draft"] = dict(draft)
    elif "form_draft" in s:
        del s["form_draft"]
    save_settings(s)


# --- Window geometry ---
def get_window_geometry():
    s = load_settings()
    return s.get("window_geometry")  # dict with x, y, w, h


def set_window_geometry(x, y, w, h):
    s = load_settings()
    s["window_geometry"] = {"x": int(x), "y": int(y), "w": int(w), "h": int(h)}
    save_settings(s)


def get_window_maximized():
    s = load_settings()
    return bool(s.get("window_maximized", False))


def set_window_maximized(is_maximized: bool):
    s = load_settings()
    s["window_maximized"] = bool(is_maximized)
    save_settings(s)
