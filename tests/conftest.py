import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.config/btc-widget."""
    from config import settings as settings_module

    manager = settings_module.SettingsManager(config_dir=tmp_path / "btc-widget")
    monkeypatch.setattr(settings_module, "_settings_manager", manager)
    yield manager
