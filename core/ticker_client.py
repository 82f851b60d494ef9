"""
REST client for the Blockchain.com BTC-USD ticker.
"""

import logging
from numbers import Real

import requests

from config.settings import REQUEST_TIMEOUT_SECONDS, TICKER_URL, get_settings_manager
from core.models import TickerRecord

logger = logging.getLogger(__name__)

TICKER_FIELDS = ("price_24h", "volume_24h", "last_trade_price")


def parse_ticker(payload) -> TickerRecord:
    """
    Decode a ticker JSON object.

    Raises ValueError when a field is missing or not a number.
    Extra fields are ignored.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

    values = {}
    for name in TICKER_FIELDS:
        if name not in payload:
            raise ValueError(f"Missing field: {name}")
        value = payload[name]
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValueError(f"Field {name} is not a number: {value!r}")
        values[name] = float(value)

    return TickerRecord(**values)


class TickerClient:
    """Fetches the 24h ticker. Every call is independent; nothing is cached."""

    def __init__(self, url: str = TICKER_URL, session: requests.Session | None = None):
        self.url = url
        self._session = session or requests.Session()
        self._configure_proxy()

    def _configure_proxy(self):
        settings = get_settings_manager().settings
        if settings.proxy.enabled:
            proxy_url = settings.proxy.get_proxy_url()
            if proxy_url:
                logger.debug(f"Configuring proxy for TickerClient: {proxy_url}")
                self._session.proxies = {"http": proxy_url, "https": proxy_url}
        else:
            self._session.proxies = {}

    def fetch(self) -> TickerRecord | None:
        """Fetch one ticker. Returns None on any transport, status or decode failure."""
        logger.debug(f"Fetching ticker from {self.url}")

        try:
            resp = self._session.get(self.url, timeout=REQUEST_TIMEOUT_SECONDS)
        except requests.RequestException as e:
            logger.error(f"Ticker request failed: {e}")
            return None

        if resp.status_code != 200:
            logger.error(f"Ticker request failed with status code: {resp.status_code}")
            return None

        try:
            record = parse_ticker(resp.json())
        except ValueError as e:
            # requests' JSONDecodeError is a ValueError too
            logger.error(f"Failed to decode ticker: {e}")
            logger.debug(f"Raw response: {resp.text[:500]}")
            return None

        logger.debug(f"Ticker fetched: {record}")
        return record
