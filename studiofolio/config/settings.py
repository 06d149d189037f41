# studiofolio/config/settings.py
"""
Application settings management for Studiofolio.

Settings files:
- settings.template.json: developer defaults (shipped with the site)
- user_settings.json: only the keys in USER_SETTINGS_KEYS, overriding the template
- environment: STUDIOFOLIO_FORM_ENDPOINT overrides form_endpoint

Cache:
- _settings_cache keeps one AppSettings per path, keyed by file mtimes
- load() returns the cached instance until either file changes
- invalidate_settings_cache() clears it explicitly
"""

import json
import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from studiofolio.services.exceptions import ConfigurationError

# Module logger
logger = logging.getLogger(__name__)

# Settings cache: path -> (mtime_template, mtime_user, AppSettings)
_settings_cache: dict[str, tuple[float, float, "AppSettings"]] = {}
_settings_cache_lock = threading.Lock()

ENV_FORM_ENDPOINT = "STUDIOFOLIO_FORM_ENDPOINT"

# Placeholder form id used in setup docs; never a real endpoint
FORM_ENDPOINT_PLACEHOLDER = "YOUR_FORM_ID"

# Keys a deployment may override in user_settings.json
USER_SETTINGS_KEYS = {
    "studio_name",
    "form_endpoint",
    "form_encoding",
    "form_field_map",
    "form_access_key",
    "optimistic_success",
    "whatsapp_number",
    "whatsapp_message",
    "host",
    "port",
}

FORM_ENCODINGS = {"multipart", "json"}


@dataclass
class AppSettings:
    """Application settings"""

    studio_name: str = "Studio"

    # Contact form backend
    form_endpoint: str = ""
    form_encoding: str = "multipart"    # "multipart" (provider field names) or "json"
    form_field_map: dict[str, str] = field(default_factory=dict)  # form field -> provider field
    form_access_key: str = ""           # JSON providers that authenticate with a public key
    form_required_fields: list[str] = field(default_factory=lambda: ["name", "email", "message"])
    optimistic_success: bool = False    # Do not inspect the response status
    request_timeout: int = 15           # Seconds

    # Timings
    success_message_seconds: float = 5.0
    deferred_scroll_delay: float = 0.1  # Seconds before scrolling to a section after a view change
    count_up_duration_ms: int = 2000

    # Viewport triggers
    reveal_threshold: float = 0.1
    reveal_root_margin: str = "0px 0px -50px 0px"
    count_up_threshold: float = 0.5

    # Click-to-chat
    whatsapp_number: str = ""
    whatsapp_message: str = "Hi! I'd like to talk about a project."

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    @classmethod
    def load(cls, path: Path, use_cache: bool = True) -> "AppSettings":
        """Load settings from template and user settings files.

        1. settings.template.json provides defaults
        2. user_settings.json overrides USER_SETTINGS_KEYS
        3. STUDIOFOLIO_FORM_ENDPOINT overrides form_endpoint

        Args:
            path: config/settings.json; used as the base path to find both files
            use_cache: reuse the cached instance when files are unchanged
        """
        config_dir = path.parent
        template_path = config_dir / "settings.template.json"
        user_settings_path = config_dir / "user_settings.json"

        cache_key = str(path.resolve())

        template_mtime = template_path.stat().st_mtime if template_path.exists() else 0.0
        user_mtime = user_settings_path.stat().st_mtime if user_settings_path.exists() else 0.0

        if use_cache:
            with _settings_cache_lock:
                if cache_key in _settings_cache:
                    cached_template_mtime, cached_user_mtime, cached_settings = _settings_cache[cache_key]
                    if cached_template_mtime == template_mtime and cached_user_mtime == user_mtime:
                        logger.debug("Using cached settings for: %s", path)
                        return cached_settings

        data = {}

        # 1. Template (developer defaults)
        if template_path.exists():
            try:
                with open(template_path, 'r', encoding='utf-8-sig') as f:
                    data = json.load(f)
                    logger.debug("Loaded template settings from: %s", template_path)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.warning("Failed to load template settings: %s", e)

        # 2. User overrides
        if user_settings_path.exists():
            try:
                with open(user_settings_path, 'r', encoding='utf-8-sig') as f:
                    user_data = json.load(f)
                    for key in USER_SETTINGS_KEYS:
                        if key in user_data:
                            data[key] = user_data[key]
                    logger.debug("Loaded user settings from: %s", user_settings_path)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.warning("Failed to load user settings: %s", e)

        # 3. Environment
        env_endpoint = os.environ.get(ENV_FORM_ENDPOINT)
        if env_endpoint:
            data["form_endpoint"] = env_endpoint

        # Filter to only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        settings = cls(**filtered_data)
        settings._validate()

        with _settings_cache_lock:
            _settings_cache[cache_key] = (template_mtime, user_mtime, settings)

        return settings

    def _validate(self) -> None:
        """Normalize out-of-range values back to defaults with warnings.

        Missing endpoint is not handled here; require_form_endpoint() fails
        fast when the app is created.
        """
        if self.form_encoding not in FORM_ENCODINGS:
            logger.warning("Unknown form_encoding (%s), resetting to multipart", self.form_encoding)
            self.form_encoding = "multipart"

        if self.request_timeout < 1 or self.request_timeout > 120:
            logger.warning("request_timeout out of range (%d), resetting to 15", self.request_timeout)
            self.request_timeout = 15

        if self.success_message_seconds <= 0:
            logger.warning("success_message_seconds must be positive (%.1f), resetting to 5.0",
                           self.success_message_seconds)
            self.success_message_seconds = 5.0

        if self.deferred_scroll_delay < 0 or self.deferred_scroll_delay > 2.0:
            logger.warning("deferred_scroll_delay out of range (%.2f), resetting to 0.1",
                           self.deferred_scroll_delay)
            self.deferred_scroll_delay = 0.1

        if self.count_up_duration_ms <= 0:
            logger.warning("count_up_duration_ms must be positive (%d), resetting to 2000",
                           self.count_up_duration_ms)
            self.count_up_duration_ms = 2000

        for name, default in (("reveal_threshold", 0.1), ("count_up_threshold", 0.5)):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                logger.warning("%s out of range (%.2f), resetting to %.1f", name, value, default)
                setattr(self, name, default)

        if not 1 <= self.port <= 65535:
            logger.warning("port out of range (%d), resetting to 8080", self.port)
            self.port = 8080

        # Digits only for wa.me links
        self.whatsapp_number = "".join(ch for ch in self.whatsapp_number if ch.isdigit())

    def require_form_endpoint(self) -> str:
        """Return the form endpoint.

        Raises:
            ConfigurationError: endpoint unset, a placeholder, or not an http(s) URL
        """
        endpoint = (self.form_endpoint or "").strip()
        if not endpoint:
            raise ConfigurationError(
                f"form_endpoint is not configured (set it in config/user_settings.json "
                f"or the {ENV_FORM_ENDPOINT} environment variable)"
            )
        if not endpoint.startswith(("http://", "https://")):
            raise ConfigurationError(f"form_endpoint must be an http(s) URL: {endpoint}")
        if FORM_ENDPOINT_PLACEHOLDER in endpoint:
            raise ConfigurationError(
                f"form_endpoint still contains the {FORM_ENDPOINT_PLACEHOLDER} placeholder: {endpoint}"
            )
        return endpoint

    def save(self, path: Path) -> None:
        """Save USER_SETTINGS_KEYS to user_settings.json and refresh the cache."""
        config_dir = path.parent
        user_settings_path = config_dir / "user_settings.json"
        template_path = config_dir / "settings.template.json"

        config_dir.mkdir(parents=True, exist_ok=True)

        data = {}
        for key in USER_SETTINGS_KEYS:
            if hasattr(self, key):
                data[key] = getattr(self, key)

        with open(user_settings_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        logger.debug("Saved user settings to: %s", user_settings_path)

        cache_key = str(path.resolve())
        template_mtime = template_path.stat().st_mtime if template_path.exists() else 0.0
        user_mtime = user_settings_path.stat().st_mtime if user_settings_path.exists() else 0.0
        with _settings_cache_lock:
            _settings_cache[cache_key] = (template_mtime, user_mtime, self)


def get_default_settings_path() -> Path:
    """Get default settings file path"""
    return Path(__file__).parent.parent.parent / "config" / "settings.json"


def invalidate_settings_cache(path: Optional[Path] = None) -> None:
    """Invalidate settings cache.

    Args:
        path: clear only this path's entry; None clears everything
    """
    with _settings_cache_lock:
        if path is None:
            _settings_cache.clear()
            logger.debug("Cleared all settings cache")
        else:
            cache_key = str(path.resolve())
            if cache_key in _settings_cache:
                del _settings_cache[cache_key]
                logger.debug("Cleared settings cache for: %s", path)
