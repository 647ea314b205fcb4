import os

# Must be set before any QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

import settings_manager
from db_schema import initialize_database


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the per-user settings directory at a temporary folder."""
    settings_dir = tmp_path / "settings"
    monkeypatch.setattr(settings_manager, "_default_settings_dir", lambda: str(settings_dir))
    monkeypatch.delenv(settings_manager.DB_PATH_ENV, raising=False)
    return settings_dir


@pytest.fixture
def db_path(tmp_path):
    """A freshly initialized notes database."""
    path = str(tmp_path / "app.db")
    initialize_database(path)
    return path


@pytest.fixture(scope="session")
def qapp():
    from PyQt5 import QtWidgets

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
