"""
Ticker card widget rendering one display snapshot using Fluent Design.
"""

from typing import Optional
from PyQt6.QtWidgets import QBoxLayout, QVBoxLayout, QHBoxLayout, QLabel, QWidget
from PyQt6.QtCore import Qt
from qfluentwidgets import CardWidget

from core.models import DisplaySnapshot, LayoutSize
from core.presenter import HEADING_COLOR, VOLUME_COLOR, WidgetText, format_snapshot
from ui.styles.theme import label_style


class TickerCard(CardWidget):
    """Fluent Design card showing BTC price, 24h delta and (large only) volume."""

    def __init__(
        self,
        size: LayoutSize = LayoutSize.SMALL,
        dark_mode: bool = False,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._size = LayoutSize(size)
        self._dark_mode = dark_mode
        self._snapshot: Optional[DisplaySnapshot] = None
        self._text: Optional[WidgetText] = None
        self._setup_ui()

    def _setup_ui(self):
        self.setBorderRadius(12)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(4)

        self.header_label = QLabel()
        self.subtitle_label = QLabel()
        layout.addWidget(self.header_label)
        layout.addWidget(self.subtitle_label)
        layout.addStretch()

        # Price and delta live in one row; medium shows them side by side
        self.pricing_layout = QHBoxLayout()
        self.pricing_layout.setSpacing(8)
        self.price_label = QLabel("Loading...")
        self.delta_label = QLabel()
        self.pricing_layout.addWidget(self.price_label)
        self.pricing_layout.addWidget(self.delta_label)
        self.pricing_layout.addStretch()
        layout.addLayout(self.pricing_layout)

        self.volume_spacer = QWidget()
        self.volume_spacer.setMinimumHeight(12)
        layout.addWidget(self.volume_spacer)

        self.volume_label = QLabel()
        layout.addWidget(self.volume_label)

        for label in (self.price_label, self.delta_label, self.volume_label):
            label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignBaseline)

        self._apply_size()

    def layout_size(self) -> LayoutSize:
        return self._size

    def widget_text(self) -> Optional[WidgetText]:
        return self._text

    def set_layout_size(self, size: LayoutSize):
        self._size = LayoutSize(size)
        self._apply_size()
        self._render()

    def set_dark_mode(self, dark_mode: bool):
        self._dark_mode = dark_mode
        self._render()

    def show_snapshot(self, snapshot: DisplaySnapshot):
        """Display a new snapshot, replacing whatever was shown."""
        self._snapshot = snapshot
        self._render()

    def _apply_size(self):
        # Small and large stack price over delta
        inline = self._size == LayoutSize.MEDIUM
        self.pricing_layout.setDirection(
            QBoxLayout.Direction.LeftToRight if inline else QBoxLayout.Direction.TopToBottom
        )
        is_large = self._size == LayoutSize.LARGE
        self.volume_label.setVisible(is_large)
        self.volume_spacer.setVisible(is_large)

    def _render(self):
        if self._snapshot is None:
            return

        text = format_snapshot(self._snapshot, self._size, self._dark_mode)
        self._text = text
        metrics = text.metrics

        self.setFixedSize(metrics.width, metrics.height)

        self.header_label.setText(text.header_text)
        self.header_label.setStyleSheet(label_style(HEADING_COLOR, metrics.header_px))
        self.subtitle_label.setText(text.subtitle_text)
        self.subtitle_label.setStyleSheet(label_style(HEADING_COLOR, metrics.subtitle_px))

        self.price_label.setText(text.price_text)
        self.price_label.setStyleSheet(label_style(text.text_color, metrics.price_px))

        self.delta_label.setText(text.delta_text)
        self.delta_label.setStyleSheet(label_style(text.delta_color, metrics.delta_px))

        if text.volume_text is not None:
            self.volume_label.setText(text.volume_text)
            self.volume_label.setStyleSheet(label_style(VOLUME_COLOR, metrics.volume_px))

        local_time = self._snapshot.timestamp.astimezone()
        self.setToolTip(f"Updated {local_time:%Y-%m-%d %H:%M:%S}")
