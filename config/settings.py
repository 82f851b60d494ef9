"""
Configuration management for BTC Widget.
Handles loading/saving window preferences and proxy configuration.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from typing import Optional
from pathlib import Path

logger = logging.getLogger(__name__)

# Fixed ticker source, not user configurable
TICKER_URL = "https://api.blockchain.com/v3/exchange/tickers/BTC-USD"

REFRESH_INTERVAL_MINUTES = 15

# requests has no default timeout; match the 60s of the original HTTP stack
REQUEST_TIMEOUT_SECONDS = 60

LAYOUT_SIZES = ("small", "medium", "large")
THEME_MODES = ("light", "dark")


@dataclass
class ProxyConfig:
    """Proxy configuration settings."""
    enabled: bool = False
    type: str = "http"  # "http" or "socks5"
    host: str = "127.0.0.1"
    port: int = 7890
    username: str = ""
    password: str = ""

    def get_proxy_url(self) -> Optional[str]:
        """Get proxy URL string for requests."""
        if not self.enabled:
            return None

        auth = ""
        if self.username and self.password:
            auth = f"{self.username}:{self.password}@"

        protocol = "socks5" if self.type == "socks5" else "http"
        return f"{protocol}://{auth}{self.host}:{self.port}"


@dataclass
class AppSettings:
    """Application settings."""
    version: str = "1.0.0"

    theme_mode: str = "light"  # "light" or "dark"
    layout_size: str = "small"  # "small", "medium" or "large"
    always_on_top: bool = False
    window_x: int = 100
    window_y: int = 100
    refresh_interval_minutes: int = REFRESH_INTERVAL_MINUTES
    proxy: ProxyConfig = field(default_factory=ProxyConfig)


class SettingsManager:
    """Manages application settings persistence."""

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            # Default to user's config directory
            if os.name == 'nt':  # Windows
                config_dir = Path(os.environ.get('APPDATA', '')) / 'btc-widget'
            else:  # Linux/Mac
                config_dir = Path.home() / '.config' / 'btc-widget'

        self.config_dir = config_dir
        self.config_file = config_dir / 'settings.json'
        self.settings = AppSettings()

        # Ensure config directory exists
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load(self) -> AppSettings:
        """
        Load settings from file.

        Unknown keys are dropped and a corrupt file falls back to defaults.

        Returns:
            Loaded settings
        """
        if not self.config_file.exists():
            return self.settings

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)

            proxy_data = data.pop('proxy', {})
            if not isinstance(proxy_data, dict):
                proxy_data = {}
            proxy_config = ProxyConfig(**proxy_data)

            recognized_fields = {
                'version', 'theme_mode', 'layout_size', 'always_on_top',
                'window_x', 'window_y', 'refresh_interval_minutes'
            }
            filtered_data = {k: v for k, v in data.items() if k in recognized_fields}

            self.settings = AppSettings(proxy=proxy_config, **filtered_data)
        except (ValueError, OSError, TypeError, KeyError, AttributeError) as e:
            # ValueError covers both JSONDecodeError and UnicodeDecodeError
            logger.warning(f"Error loading settings: {e}. Resetting to default settings")
            self.settings = AppSettings()

        self._validate()

        return self.settings

    def _validate(self) -> None:
        """Replace values of the wrong type or range with their defaults."""
        defaults = AppSettings()
        settings = self.settings

        if settings.theme_mode not in THEME_MODES:
            logger.warning(f"Unknown theme mode {settings.theme_mode!r}, using default")
            settings.theme_mode = defaults.theme_mode

        if settings.layout_size not in LAYOUT_SIZES:
            logger.warning(f"Unknown layout size {settings.layout_size!r}, using default")
            settings.layout_size = defaults.layout_size

        if not isinstance(settings.always_on_top, bool):
            settings.always_on_top = defaults.always_on_top

        # bool is an int subclass; neither belongs in a coordinate
        for name in ('window_x', 'window_y'):
            value = getattr(settings, name)
            if isinstance(value, bool) or not isinstance(value, int):
                logger.warning(f"Invalid {name} {value!r}, using default")
                setattr(settings, name, getattr(defaults, name))

        interval = settings.refresh_interval_minutes
        if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
            settings.refresh_interval_minutes = REFRESH_INTERVAL_MINUTES

    def save(self) -> None:
        """Save settings to file."""
        data = asdict(self.settings)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def update_layout_size(self, layout_size: str) -> None:
        """Update the widget footprint."""
        if layout_size not in LAYOUT_SIZES:
            raise ValueError(f"Unknown layout size: {layout_size}")
        self.settings.layout_size = layout_size
        self.save()

    def update_window_position(self, x: int, y: int) -> None:
        self.settings.window_x = x
        self.settings.window_y = y
        self.save()


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings_manager() -> SettingsManager:
    """Get the global settings manager instance."""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
        _settings_manager.load()
    return _settings_manager
