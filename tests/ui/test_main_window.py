from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from PyQt6.QtCore import QObject, pyqtSignal

from core.models import PREVIEW_RECORD, LayoutSize, build_snapshot
from core.presenter import LAYOUT_METRICS
from ui.main_window import TOOLBAR_HEIGHT, WINDOW_MARGIN, MainWindow


class FakeScheduler(QObject):
    snapshot_ready = pyqtSignal(object)
    refresh_scheduled = pyqtSignal(object)

    def __init__(self):
        super().__init__()
        self.refresh = MagicMock()
        self.stop = MagicMock()

    def start(self):
        self.snapshot_ready.emit(build_snapshot(datetime.now(timezone.utc), PREVIEW_RECORD))


@pytest.fixture
def window(qapp, isolated_settings):
    scheduler = FakeScheduler()
    win = MainWindow(scheduler=scheduler, settings_manager=isolated_settings)
    win.start()
    yield win
    win.deleteLater()


def test_start_renders_placeholder(window):
    assert window.card.price_label.text() == "11370.2"


def test_window_fits_card(window):
    metrics = LAYOUT_METRICS[LayoutSize.SMALL]

    assert window.width() == metrics.width + 2 * WINDOW_MARGIN
    assert window.height() == metrics.height + TOOLBAR_HEIGHT + 2 * WINDOW_MARGIN


def test_size_button_cycles_and_persists(window, isolated_settings):
    window.toolbar.size_btn.click()
    assert window.card.layout_size() == LayoutSize.MEDIUM
    assert isolated_settings.settings.layout_size == "medium"

    window.toolbar.size_btn.click()
    assert window.card.layout_size() == LayoutSize.LARGE

    window.toolbar.size_btn.click()
    assert window.card.layout_size() == LayoutSize.SMALL


def test_refresh_button_triggers_scheduler(window):
    window.toolbar.refresh_btn.click()

    window._scheduler.refresh.assert_called_once()


def test_initial_size_from_settings(qapp, isolated_settings):
    isolated_settings.settings.layout_size = "large"

    win = MainWindow(scheduler=FakeScheduler(), settings_manager=isolated_settings)

    assert win.card.layout_size() == LayoutSize.LARGE
    win.deleteLater()
