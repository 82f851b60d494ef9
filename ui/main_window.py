"""
Main application window using Fluent Design.
"""

import logging
from datetime import timedelta
from typing import Optional
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QApplication
from PyQt6.QtCore import Qt, QPoint
from PyQt6.QtGui import QMouseEvent, QCloseEvent
from qfluentwidgets import setTheme, Theme

from config.settings import SettingsManager, get_settings_manager
from core.models import DisplaySnapshot, LayoutSize
from core.refresh_scheduler import RefreshScheduler
from core.timeline import TimelineProvider
from core.worker_controller import WorkerController
from ui.styles.theme import get_window_stylesheet, is_dark
from ui.widgets.ticker_card import TickerCard
from ui.widgets.toolbar import Toolbar

logger = logging.getLogger(__name__)

SIZE_ORDER = [LayoutSize.SMALL, LayoutSize.MEDIUM, LayoutSize.LARGE]

TOOLBAR_HEIGHT = 34
WINDOW_MARGIN = 8


class MainWindow(QMainWindow):
    """Frameless window hosting the ticker card."""

    def __init__(
        self,
        scheduler: Optional[RefreshScheduler] = None,
        settings_manager: Optional[SettingsManager] = None,
    ):
        super().__init__()

        self._drag_pos: Optional[QPoint] = None
        self._settings_manager = settings_manager or get_settings_manager()
        settings = self._settings_manager.settings

        if scheduler is None:
            provider = TimelineProvider(
                refresh_interval=timedelta(minutes=settings.refresh_interval_minutes)
            )
            scheduler = RefreshScheduler(provider, self)
        self._scheduler = scheduler

        theme_mode = settings.theme_mode
        setTheme(Theme.DARK if is_dark(theme_mode) else Theme.LIGHT)

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        settings = self._settings_manager.settings

        flags = Qt.WindowType.FramelessWindowHint
        if settings.always_on_top:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        self.setWindowFlags(flags)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setWindowTitle("Bitcoin Tracker")

        self.move(settings.window_x, settings.window_y)

        central = QWidget()
        central.setObjectName("centralWidget")
        central.setStyleSheet(get_window_stylesheet(settings.theme_mode))
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(WINDOW_MARGIN, WINDOW_MARGIN, WINDOW_MARGIN, WINDOW_MARGIN)
        layout.setSpacing(0)

        self.toolbar = Toolbar(pinned=settings.always_on_top)
        layout.addWidget(self.toolbar)

        self.card = TickerCard(
            size=LayoutSize(settings.layout_size),
            dark_mode=is_dark(settings.theme_mode),
        )
        layout.addWidget(self.card)

        self._fit_to_card()

    def _connect_signals(self):
        self.toolbar.refresh_clicked.connect(self._scheduler.refresh)
        self.toolbar.size_clicked.connect(self._cycle_size)
        self.toolbar.pin_clicked.connect(self._toggle_always_on_top)
        self.toolbar.close_clicked.connect(self._close_app)

        self._scheduler.snapshot_ready.connect(self._on_snapshot)

    def start(self):
        """Show the placeholder and begin refreshing."""
        self._scheduler.start()

    def _on_snapshot(self, snapshot: DisplaySnapshot):
        logger.debug(f"Rendering {snapshot.trend.value} snapshot from {snapshot.timestamp}")
        self.card.show_snapshot(snapshot)
        self._fit_to_card()

    def _fit_to_card(self):
        text = self.card.widget_text()
        if text is None:
            return
        metrics = text.metrics
        self.setFixedSize(
            metrics.width + 2 * WINDOW_MARGIN,
            metrics.height + TOOLBAR_HEIGHT + 2 * WINDOW_MARGIN,
        )

    def _cycle_size(self):
        current = self.card.layout_size()
        next_size = SIZE_ORDER[(SIZE_ORDER.index(current) + 1) % len(SIZE_ORDER)]
        logger.info(f"Switching layout size: {current.value} -> {next_size.value}")

        self.card.set_layout_size(next_size)
        self._fit_to_card()
        self._settings_manager.update_layout_size(next_size.value)

    def _toggle_always_on_top(self, pinned: bool):
        self._settings_manager.settings.always_on_top = pinned
        self._settings_manager.save()

        flags = self.windowFlags()
        if pinned:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        else:
            flags &= ~Qt.WindowType.WindowStaysOnTopHint

        self.setWindowFlags(flags)
        self.show()

    def _save_position(self):
        pos = self.pos()
        self._settings_manager.update_window_position(pos.x(), pos.y())

    def _close_app(self):
        self.close()

    def closeEvent(self, event: QCloseEvent):
        self._save_position()
        self._scheduler.stop()
        WorkerController.get_instance().cleanup_all()
        super().closeEvent(event)
        QApplication.quit()

    # Window dragging
    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self._drag_pos = event.globalPosition().toPoint() - self.frameGeometry().topLeft()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        if self._drag_pos is not None and event.buttons() & Qt.MouseButton.LeftButton:
            self.move(event.globalPosition().toPoint() - self._drag_pos)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        self._drag_pos = None
        super().mouseReleaseEvent(event)
