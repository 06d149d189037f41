# tests/test_settings.py
"""Tests for studiofolio.config.settings"""

import json
import tempfile
from pathlib import Path

import pytest

from studiofolio.config.settings import (
    ENV_FORM_ENDPOINT,
    USER_SETTINGS_KEYS,
    AppSettings,
    get_default_settings_path,
    invalidate_settings_cache,
)
from studiofolio.services.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(ENV_FORM_ENDPOINT, raising=False)
    invalidate_settings_cache()
    yield
    invalidate_settings_cache()


class TestAppSettings:
    """Tests for AppSettings dataclass"""

    def test_default_values(self):
        settings = AppSettings()
        assert settings.form_endpoint == ""
        assert settings.form_encoding == "multipart"
        assert settings.form_required_fields == ["name", "email", "message"]
        assert settings.optimistic_success is False
        assert settings.success_message_seconds == 5.0
        assert settings.deferred_scroll_delay == 0.1
        assert settings.count_up_duration_ms == 2000
        assert settings.reveal_threshold == 0.1
        assert settings.count_up_threshold == 0.5

    def test_save_and_load(self):
        """Template supplies defaults; user_settings.json overrides USER_SETTINGS_KEYS"""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            settings_path = config_dir / "settings.json"

            template_path = config_dir / "settings.template.json"
            template_path.write_text(json.dumps({
                "studio_name": "Template Studio",
                "count_up_duration_ms": 1500,
            }))

            settings = AppSettings(
                studio_name="Northwind Studio",
                form_endpoint="https://forms.example.com/f",
                whatsapp_number="15550001111",
            )
            settings.save(settings_path)

            user_settings_path = config_dir / "user_settings.json"
            assert user_settings_path.exists()
            saved = json.loads(user_settings_path.read_text(encoding="utf-8"))
            assert set(saved) == USER_SETTINGS_KEYS

            loaded = AppSettings.load(settings_path, use_cache=False)
            assert loaded.studio_name == "Northwind Studio"
            assert loaded.form_endpoint == "https://forms.example.com/f"
            # Not a user key: comes from the template
            assert loaded.count_up_duration_ms == 1500

    def test_user_settings_ignores_non_user_keys(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            (config_dir / "user_settings.json").write_text(json.dumps({
                "studio_name": "Mine",
                "count_up_duration_ms": 10,
            }))
            loaded = AppSettings.load(config_dir / "settings.json", use_cache=False)
            assert loaded.studio_name == "Mine"
            assert loaded.count_up_duration_ms == 2000

    def test_load_nonexistent_file(self):
        settings = AppSettings.load(Path("/nonexistent/path/settings.json"), use_cache=False)
        assert settings.studio_name == "Studio"
        assert settings.port == 8080

    def test_load_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            (config_dir / "settings.template.json").write_text("{ not json")
            settings = AppSettings.load(config_dir / "settings.json", use_cache=False)
            assert settings.form_encoding == "multipart"

    def test_unknown_keys_are_dropped(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            (config_dir / "settings.template.json").write_text(json.dumps({
                "studio_name": "X",
                "legacy_option": True,
            }))
            settings = AppSettings.load(config_dir / "settings.json", use_cache=False)
            assert settings.studio_name == "X"
            assert not hasattr(settings, "legacy_option")

    def test_env_overrides_endpoint(self, monkeypatch):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            (config_dir / "user_settings.json").write_text(json.dumps({
                "form_endpoint": "https://file.example.com",
            }))
            monkeypatch.setenv(ENV_FORM_ENDPOINT, "https://env.example.com")
            settings = AppSettings.load(config_dir / "settings.json", use_cache=False)
            assert settings.form_endpoint == "https://env.example.com"

    def test_cache_returns_same_instance(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "settings.json"
            first = AppSettings.load(path)
            second = AppSettings.load(path)
            assert first is second
            invalidate_settings_cache(path)
            assert AppSettings.load(path) is not first


class TestValidation:

    def test_out_of_range_values_reset(self):
        settings = AppSettings(
            form_encoding="xml",
            request_timeout=0,
            success_message_seconds=-1,
            deferred_scroll_delay=10,
            count_up_duration_ms=0,
            reveal_threshold=1.5,
            count_up_threshold=-0.1,
            port=70000,
        )
        settings._validate()
        assert settings.form_encoding == "multipart"
        assert settings.request_timeout == 15
        assert settings.success_message_seconds == 5.0
        assert settings.deferred_scroll_delay == 0.1
        assert settings.count_up_duration_ms == 2000
        assert settings.reveal_threshold == 0.1
        assert settings.count_up_threshold == 0.5
        assert settings.port == 8080

    def test_whatsapp_number_digits_only(self):
        settings = AppSettings(whatsapp_number="+1 (555) 000-1111")
        settings._validate()
        assert settings.whatsapp_number == "15550001111"


class TestRequireFormEndpoint:

    def test_missing_endpoint(self):
        with pytest.raises(ConfigurationError):
            AppSettings().require_form_endpoint()

    def test_non_http_endpoint(self):
        with pytest.raises(ConfigurationError):
            AppSettings(form_endpoint="ftp://example.com").require_form_endpoint()

    def test_placeholder_endpoint_rejected(self):
        settings = AppSettings(form_endpoint="https://docs.google.com/forms/d/e/YOUR_FORM_ID/formResponse")
        with pytest.raises(ConfigurationError):
            settings.require_form_endpoint()

    def test_valid_endpoint_is_stripped(self):
        settings = AppSettings(form_endpoint="  https://example.com/f  ")
        assert settings.require_form_endpoint() == "https://example.com/f"


class TestShippedTemplate:

    def test_template_loads_with_defaults(self):
        template_path = get_default_settings_path().parent / "settings.template.json"
        data = json.loads(template_path.read_text(encoding="utf-8"))
        known = set(AppSettings.__dataclass_fields__)
        assert set(data) <= known
        assert data["form_encoding"] in {"multipart", "json"}
        assert set(data["form_field_map"]) <= {"name", "email", "phone", "service", "message"}

    def test_unconfigured_template_fails_fast(self):
        """The shipped template alone must not start with a usable endpoint"""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            shipped = get_default_settings_path().parent / "settings.template.json"
            (config_dir / "settings.template.json").write_text(
                shipped.read_text(encoding="utf-8"), encoding="utf-8"
            )
            settings = AppSettings.load(config_dir / "settings.json", use_cache=False)
            assert settings.form_endpoint == ""
            with pytest.raises(ConfigurationError):
                settings.require_form_endpoint()
