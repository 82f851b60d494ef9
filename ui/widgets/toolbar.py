"""
Toolbar widget with window controls using Fluent Design.
"""

from typing import Optional
from PyQt6.QtWidgets import QWidget, QHBoxLayout
from PyQt6.QtCore import pyqtSignal
from qfluentwidgets import TransparentToolButton, FluentIcon as FIF


class Toolbar(QWidget):
    """Toolbar with refresh, size, pin and close buttons."""

    refresh_clicked = pyqtSignal()
    size_clicked = pyqtSignal()
    pin_clicked = pyqtSignal(bool)  # Emits new pin state
    close_clicked = pyqtSignal()

    def __init__(self, pinned: bool = False, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._pinned = pinned
        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(5, 5, 5, 5)
        layout.setSpacing(4)

        layout.addStretch()

        self.refresh_btn = self._add_button(layout, FIF.SYNC, "Refresh Now")
        self.refresh_btn.clicked.connect(self.refresh_clicked)

        self.size_btn = self._add_button(layout, FIF.ZOOM, "Change Size")
        self.size_btn.clicked.connect(self.size_clicked)

        self.pin_btn = self._add_button(layout, FIF.PIN, "Pin Window")
        self.pin_btn.clicked.connect(self._toggle_pin)
        self._update_pin_icon()

        self.close_btn = self._add_button(layout, FIF.CLOSE, "Close")
        self.close_btn.clicked.connect(self.close_clicked)

        layout.addStretch()

    def _add_button(self, layout: QHBoxLayout, icon, tooltip: str) -> TransparentToolButton:
        button = TransparentToolButton(icon, self)
        button.setFixedSize(24, 24)
        button.setToolTip(tooltip)
        layout.addWidget(button)
        return button

    def _toggle_pin(self):
        self._pinned = not self._pinned
        self._update_pin_icon()
        self.pin_clicked.emit(self._pinned)

    def _update_pin_icon(self):
        self.pin_btn.setIcon(FIF.UNPIN if self._pinned else FIF.PIN)
        self.pin_btn.setToolTip("Unpin Window" if self._pinned else "Pin Window")
