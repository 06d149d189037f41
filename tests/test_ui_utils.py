# tests/test_ui_utils.py
"""Tests for studiofolio.ui.utils and studiofolio.ui.scripts helpers"""

import inspect
import logging
from unittest.mock import MagicMock

import pytest

from studiofolio.models.types import GalleryItem
from studiofolio.ui.scripts import observe_props, scroll_to_section_js, scroll_to_top_js
from studiofolio.ui.utils import (
    HANDLER_ERROR_MESSAGE,
    build_whatsapp_link,
    copyright_line,
    guarded,
    project_meta,
)


class TestWhatsappLink:

    def test_digits_only(self):
        assert build_whatsapp_link("+1 (555) 000-1111") == "https://wa.me/15550001111"

    def test_message_is_url_encoded(self):
        link = build_whatsapp_link("123", "Hi! I'd like a site & more")
        assert link == "https://wa.me/123?text=Hi%21%20I%27d%20like%20a%20site%20%26%20more"

    def test_no_digits_raises(self):
        with pytest.raises(ValueError):
            build_whatsapp_link("call us")


class TestFormatting:

    def test_copyright_line(self):
        assert copyright_line("Studio", year=2024) == "© 2024 Studio. All rights reserved."

    def test_project_meta_skips_empty(self):
        item = GalleryItem(id=9, title="T", category="C", description="", duration="4 weeks", year="2024")
        labels = [label for label, _ in project_meta(item)]
        assert "Client" not in labels
        assert labels == ["Duration", "Year"]


class TestScripts:

    def test_scroll_to_section_quotes_id(self):
        js = scroll_to_section_js("contact")
        assert '"contact"' in js

    def test_scroll_to_top_behavior(self):
        assert "smooth" in scroll_to_top_js(True)
        assert "smooth" not in scroll_to_top_js(False)

    def test_observe_props_carries_target_and_threshold(self):
        props = observe_props("work", 0.1, "0px 0px -50px 0px")
        assert "work" in props
        assert "0.1" in props


class TestGuarded:

    def test_error_is_logged_and_notified(self, caplog):
        notify = MagicMock()

        def broken():
            raise RuntimeError("boom")

        handler = guarded(broken, "Carousel next", notify=notify)
        with caplog.at_level(logging.ERROR, logger="studiofolio.ui.utils"):
            assert handler() is None

        notify.assert_called_once_with(HANDLER_ERROR_MESSAGE, type='negative')
        assert "Carousel next failed" in caplog.text
        assert "boom" in caplog.text

    def test_result_passes_through(self):
        notify = MagicMock()
        handler = guarded(lambda: 42, "Answer", notify=notify)
        assert handler() == 42
        notify.assert_not_called()

    def test_event_argument_forwarded(self):
        seen = []
        handler = guarded(lambda e, i=3: seen.append((e, i)), "Open project", notify=MagicMock())
        handler("click")
        assert seen == [("click", 3)]

    def test_signature_preserved(self):
        # NiceGUI passes event arguments only to handlers that accept them
        assert list(inspect.signature(guarded(lambda: None, "No args")).parameters) == []
        params = inspect.signature(guarded(lambda _, i=1: i, "With args")).parameters
        assert list(params) == ["_", "i"]
