import threading
import time
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest

from core.models import PREVIEW_RECORD, TickerRecord, build_snapshot
from core.refresh_scheduler import RefreshScheduler, TimelineWorker
from core.timeline import Timeline, TimelineProvider
from core.worker_controller import WorkerController


RECORD = TickerRecord(price_24h=100.0, volume_24h=5.0, last_trade_price=90.0)


def wait_until(qapp, condition, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not condition() and time.monotonic() < deadline:
        qapp.processEvents()
        time.sleep(0.01)
    return condition()


@pytest.fixture
def provider():
    client = MagicMock()
    client.fetch.return_value = RECORD
    return TimelineProvider(client=client)


@pytest.fixture
def scheduler(qapp, provider):
    scheduler = RefreshScheduler(provider)
    yield scheduler
    scheduler.stop()


class TestTimelineWorker:
    def test_run_emits_timeline(self, qapp, provider):
        worker = TimelineWorker(provider)
        received = []
        worker.timeline_ready.connect(received.append)

        # Run in the calling thread so the signal is delivered directly
        worker.run()

        assert len(received) == 1
        assert received[0].entries[0].record == RECORD

    def test_unexpected_error_becomes_failed_entry(self, qapp):
        provider = MagicMock()
        provider.timeline.side_effect = RuntimeError("boom")
        provider.refresh_interval = timedelta(minutes=15)
        worker = TimelineWorker(provider)
        received = []
        worker.timeline_ready.connect(received.append)

        worker.run()

        assert received[0].entries[0].fetch_failed is True


class TestRefreshScheduler:
    def test_start_emits_placeholder_first(self, scheduler):
        received = []
        scheduler.snapshot_ready.connect(received.append)

        with patch.object(scheduler, "refresh") as mock_refresh:
            scheduler.start()

        assert received[0].record == PREVIEW_RECORD
        assert scheduler.is_running()
        mock_refresh.assert_called_once()

    def test_timeline_completion_publishes_and_rearms(self, scheduler):
        received = []
        scheduled = []
        scheduler.snapshot_ready.connect(received.append)
        scheduler.refresh_scheduled.connect(scheduled.append)

        with patch.object(scheduler, "refresh"):
            scheduler.start()

        now = datetime.now(timezone.utc)
        refresh_at = now + timedelta(minutes=15)
        entry = build_snapshot(now, RECORD)
        scheduler._on_timeline_ready(Timeline(entries=[entry], refresh_at=refresh_at))

        assert received[-1] is entry
        assert scheduled == [refresh_at]
        assert scheduler.next_refresh_at == refresh_at
        assert scheduler._timer.isActive()
        remaining = scheduler._timer.remainingTime()
        assert 14 * 60 * 1000 < remaining <= 15 * 60 * 1000

    def test_past_refresh_time_fires_immediately(self, scheduler):
        with patch.object(scheduler, "refresh"):
            scheduler.start()

        past = datetime.now(timezone.utc) - timedelta(minutes=1)
        scheduler._on_timeline_ready(
            Timeline(entries=[build_snapshot(past, None)], refresh_at=past)
        )

        assert scheduler._timer.interval() == 0

    def test_completion_after_stop_publishes_but_does_not_rearm(self, scheduler):
        received = []
        scheduler.snapshot_ready.connect(received.append)
        scheduler.stop()

        now = datetime.now(timezone.utc)
        entry = build_snapshot(now, RECORD)
        scheduler._on_timeline_ready(
            Timeline(entries=[entry], refresh_at=now + timedelta(minutes=15))
        )

        assert received == [entry]
        assert not scheduler._timer.isActive()
        assert scheduler.next_refresh_at is None

    def test_refresh_starts_registered_worker(self, scheduler):
        with patch("core.refresh_scheduler.TimelineWorker") as mock_worker_cls, patch(
            "core.refresh_scheduler.WorkerController"
        ) as mock_controller:
            scheduler.refresh()

        worker = mock_worker_cls.return_value
        worker.timeline_ready.connect.assert_called_once_with(scheduler._on_timeline_ready)
        mock_controller.get_instance.return_value.register_worker.assert_called_once_with(worker)
        worker.start.assert_called_once()


class TestRefreshSchedulerThreaded:
    def test_placeholder_then_fetched_record_on_gui_thread(self, qapp, scheduler):
        received = []
        receiving_threads = []

        def on_snapshot(snapshot):
            received.append(snapshot)
            receiving_threads.append(threading.get_ident())

        scheduler.snapshot_ready.connect(on_snapshot)
        controller = WorkerController.get_instance()

        scheduler.start()

        # Placeholder arrives synchronously; the fetch is still in flight
        assert [entry.record for entry in received] == [PREVIEW_RECORD]
        worker = controller._workers[-1]
        assert isinstance(worker, TimelineWorker)

        assert wait_until(qapp, lambda: len(received) == 2 and worker not in controller._workers)

        assert received[0].record == PREVIEW_RECORD
        assert received[1].record == RECORD
        assert received[1].fetch_failed is False
        assert receiving_threads == [threading.get_ident()] * 2
        assert scheduler.next_refresh_at == received[1].timestamp + timedelta(minutes=15)
        assert scheduler._timer.isActive()

    def test_failed_fetch_is_delivered_as_error_snapshot(self, qapp, provider, scheduler):
        provider._client.fetch.return_value = None
        received = []
        scheduler.snapshot_ready.connect(received.append)

        scheduler.start()

        assert wait_until(qapp, lambda: len(received) == 2)
        assert received[1].fetch_failed is True
