"""
Standard data models for the application.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class TickerRecord:
    """24h ticker statistics for BTC-USD."""

    price_24h: float
    volume_24h: float
    last_trade_price: float

    @property
    def difference(self) -> float:
        return self.price_24h - self.last_trade_price


# Shown before the first fetch completes
PREVIEW_RECORD = TickerRecord(price_24h=11370.2, volume_24h=61.5274347, last_trade_price=11381.5)

# Paired with every failed fetch
ERROR_RECORD = TickerRecord(price_24h=0.0, volume_24h=0.0, last_trade_price=0.0)


class TrendMode(str, Enum):
    """Direction of the 24h move; also the color key."""

    UP = "up"
    DOWN = "down"
    ERROR = "error"


class LayoutSize(str, Enum):
    """Widget footprint requested by the host window."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class DisplaySnapshot:
    """A render-ready ticker entry."""

    timestamp: datetime
    record: TickerRecord
    fetch_failed: bool = False

    @property
    def trend(self) -> TrendMode:
        # A genuine tie is shown the same way as a failed fetch
        if self.fetch_failed or self.record.difference == 0.0:
            return TrendMode.ERROR
        if self.record.difference > 0.0:
            return TrendMode.UP
        return TrendMode.DOWN


def build_snapshot(now: datetime, fetched: TickerRecord | None) -> DisplaySnapshot:
    """Combine a fetch result with its timestamp."""
    if fetched is None:
        return DisplaySnapshot(timestamp=now, record=ERROR_RECORD, fetch_failed=True)
    return DisplaySnapshot(timestamp=now, record=fetched, fetch_failed=False)
