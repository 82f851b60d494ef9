"""
Recurring refresh driver: runs the timeline provider off the GUI thread and
re-arms itself for the refresh time each timeline asks for.
"""

import logging
from datetime import datetime

from PyQt6.QtCore import QObject, QThread, QTimer, pyqtSignal

from core.models import build_snapshot
from core.timeline import Timeline, TimelineProvider, utc_now
from core.worker_controller import WorkerController

logger = logging.getLogger(__name__)


class TimelineWorker(QThread):
    """Worker thread producing one timeline."""

    timeline_ready = pyqtSignal(object)  # Timeline

    def __init__(self, provider: TimelineProvider, parent: QObject | None = None):
        super().__init__(parent)
        self._provider = provider

    def run(self):
        now = utc_now()
        try:
            timeline = self._provider.timeline(now)
        except Exception as e:
            # fetch() already absorbs network errors; this is anything else
            logger.error(f"Timeline production failed: {e}", exc_info=True)
            timeline = Timeline(
                entries=[build_snapshot(now, None)],
                refresh_at=now + self._provider.refresh_interval,
            )
        self.timeline_ready.emit(timeline)


class RefreshScheduler(QObject):
    """
    Emits a placeholder immediately, then a fresh snapshot every refresh.

    Overlapping refreshes are allowed; each completion is published in the
    order it arrives, so the latest completed fetch is what stays on screen.
    """

    snapshot_ready = pyqtSignal(object)  # DisplaySnapshot
    refresh_scheduled = pyqtSignal(object)  # datetime

    def __init__(self, provider: TimelineProvider | None = None, parent: QObject | None = None):
        super().__init__(parent)
        self._provider = provider or TimelineProvider()
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.refresh)
        self._running = False
        self._next_refresh_at: datetime | None = None

    @property
    def next_refresh_at(self) -> datetime | None:
        return self._next_refresh_at

    def is_running(self) -> bool:
        return self._running

    def start(self):
        logger.info("Starting refresh scheduler")
        self._running = True
        self.snapshot_ready.emit(self._provider.placeholder())
        self.refresh()

    def stop(self):
        logger.info("Stopping refresh scheduler")
        self._running = False
        self._timer.stop()
        self._next_refresh_at = None

    def refresh(self):
        """Start a background fetch now."""
        worker = TimelineWorker(self._provider)
        worker.timeline_ready.connect(self._on_timeline_ready)
        WorkerController.get_instance().register_worker(worker)
        worker.start()

    def _on_timeline_ready(self, timeline: Timeline):
        for entry in timeline.entries:
            self.snapshot_ready.emit(entry)

        if not self._running:
            return

        delay_ms = max(0, int((timeline.refresh_at - utc_now()).total_seconds() * 1000))
        self._next_refresh_at = timeline.refresh_at
        self._timer.start(delay_ms)
        logger.debug(f"Next refresh in {delay_ms / 1000:.0f}s")
        self.refresh_scheduled.emit(timeline.refresh_at)
