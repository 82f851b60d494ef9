"""
Timeline provider: produces display snapshots and declares when to refresh next.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

from config.settings import REFRESH_INTERVAL_MINUTES
from core.models import PREVIEW_RECORD, DisplaySnapshot, build_snapshot
from core.ticker_client import TickerClient

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Timeline:
    entries: list[DisplaySnapshot]
    refresh_at: datetime


class TimelineProvider:
    """
    Data side of a widget timeline.

    Does not own a timer; callers are expected to ask again at or after
    ``refresh_at``.
    """

    def __init__(
        self,
        client: TickerClient | None = None,
        refresh_interval: timedelta = timedelta(minutes=REFRESH_INTERVAL_MINUTES),
        clock: Callable[[], datetime] = utc_now,
    ):
        self._client = client or TickerClient()
        self.refresh_interval = refresh_interval
        self._clock = clock

    def placeholder(self, now: datetime | None = None) -> DisplaySnapshot:
        """Instant entry shown before the first fetch completes."""
        return DisplaySnapshot(timestamp=now or self._clock(), record=PREVIEW_RECORD, fetch_failed=False)

    def snapshot(self, now: datetime | None = None) -> DisplaySnapshot:
        """One-shot entry from a fresh fetch."""
        now = now or self._clock()
        return build_snapshot(now, self._client.fetch())

    def produce_next(self, now: datetime | None = None) -> tuple[DisplaySnapshot, datetime]:
        now = now or self._clock()
        entry = build_snapshot(now, self._client.fetch())
        refresh_at = now + self.refresh_interval
        logger.info(
            f"Produced {entry.trend.value} entry, next refresh at {refresh_at.isoformat()}"
        )
        return entry, refresh_at

    def timeline(self, now: datetime | None = None) -> Timeline:
        entry, refresh_at = self.produce_next(now)
        return Timeline(entries=[entry], refresh_at=refresh_at)
