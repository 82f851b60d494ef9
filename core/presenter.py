"""
Turns a display snapshot into the strings, colors and metrics the widget shows.
Pure functions only; nothing here touches Qt.
"""

from dataclasses import dataclass

from core.models import DisplaySnapshot, LayoutSize, TrendMode

HEADER_TEXT = "BTC App"
SUBTITLE_TEXT = "Bitcoin"

PLACEHOLDER_TEXT = "± ––––"
VOLUME_PLACEHOLDER = "––––"
VOLUME_PREFIX = "VOLUME: "

TREND_COLORS = {
    TrendMode.UP: "#4CAF50",
    TrendMode.DOWN: "#F44336",
    TrendMode.ERROR: "#9E9E9E",
}

HEADING_COLOR = "#F7931A"
VOLUME_COLOR = "#E91E63"


@dataclass(frozen=True)
class LayoutMetrics:
    width: int
    height: int
    header_px: int
    subtitle_px: int
    price_px: int
    delta_px: int
    volume_px: int
    inline_pricing: bool  # price and delta on one row


LAYOUT_METRICS = {
    LayoutSize.SMALL: LayoutMetrics(
        width=170, height=170, header_px=28, subtitle_px=17,
        price_px=17, delta_px=13, volume_px=22, inline_pricing=False,
    ),
    LayoutSize.MEDIUM: LayoutMetrics(
        width=364, height=170, header_px=28, subtitle_px=17,
        price_px=30, delta_px=22, volume_px=22, inline_pricing=True,
    ),
    LayoutSize.LARGE: LayoutMetrics(
        width=364, height=382, header_px=40, subtitle_px=28,
        price_px=55, delta_px=22, volume_px=22, inline_pricing=False,
    ),
}


@dataclass(frozen=True)
class WidgetText:
    header_text: str
    subtitle_text: str
    price_text: str
    delta_text: str
    volume_text: str | None
    color_key: TrendMode
    text_color: str
    delta_color: str
    metrics: LayoutMetrics


def sign_prefix(trend: TrendMode) -> str:
    return "+" if trend == TrendMode.UP else ""


def format_price(snapshot: DisplaySnapshot) -> str:
    if snapshot.fetch_failed:
        return PLACEHOLDER_TEXT
    return f"{sign_prefix(snapshot.trend)}{snapshot.record.price_24h:.1f}"


def format_delta(snapshot: DisplaySnapshot) -> str:
    if snapshot.fetch_failed:
        return PLACEHOLDER_TEXT
    return f"{sign_prefix(snapshot.trend)}{snapshot.record.difference:.2f}"


def format_volume(snapshot: DisplaySnapshot) -> str:
    if snapshot.fetch_failed:
        return VOLUME_PREFIX + VOLUME_PLACEHOLDER
    return f"{VOLUME_PREFIX}{snapshot.record.volume_24h:.2f}"


def format_snapshot(
    snapshot: DisplaySnapshot, size: LayoutSize, dark_mode: bool = False
) -> WidgetText:
    """
    Format a snapshot for one layout size.

    Args:
        snapshot: Entry to display
        size: Requested widget footprint; only LARGE shows volume
        dark_mode: Selects white instead of black for monochrome text

    Returns:
        WidgetText ready for any rendering layer
    """
    size = LayoutSize(size)
    trend = snapshot.trend

    return WidgetText(
        header_text=HEADER_TEXT,
        subtitle_text=SUBTITLE_TEXT,
        price_text=format_price(snapshot),
        delta_text=format_delta(snapshot),
        volume_text=format_volume(snapshot) if size == LayoutSize.LARGE else None,
        color_key=trend,
        text_color="#FFFFFF" if dark_mode else "#000000",
        delta_color=TREND_COLORS[trend],
        metrics=LAYOUT_METRICS[size],
    )
