# studiofolio/ui/utils.py
"""
UI utility functions for Studiofolio.
"""

import datetime
import functools
import logging
import urllib.parse
from typing import Callable, Optional

# Module logger
logger = logging.getLogger(__name__)

WHATSAPP_BASE_URL = "https://wa.me/"

HANDLER_ERROR_MESSAGE = "Something went wrong. Please try again."


def build_whatsapp_link(number: str, message: Optional[str] = None) -> str:
    """Click-to-chat link: https://wa.me/<digits>?text=<urlencoded message>"""
    digits = "".join(ch for ch in number if ch.isdigit())
    if not digits:
        raise ValueError("WhatsApp number must contain digits")
    url = f"{WHATSAPP_BASE_URL}{digits}"
    if message:
        url += "?" + urllib.parse.urlencode({"text": message}, quote_via=urllib.parse.quote)
    return url


def copyright_line(studio_name: str, year: Optional[int] = None) -> str:
    year = year or datetime.date.today().year
    return f"© {year} {studio_name}. All rights reserved."


def project_meta(item) -> list[tuple[str, str]]:
    """(label, value) pairs for the detail view, skipping empty fields"""
    pairs = [("Client", item.client), ("Duration", item.duration), ("Year", item.year)]
    return [(label, value) for label, value in pairs if value]


def guarded(handler: Callable, action: str, notify: Optional[Callable] = None) -> Callable:
    """Wrap a UI event handler so errors are logged and shown, not lost in the event loop.

    The wrapper keeps the handler's signature, so NiceGUI still decides
    whether to pass the event arguments.

    Args:
        handler: click/key handler
        action: short description for the log ("Carousel next")
        notify: ui.notify replacement (tests); defaults to NiceGUI's
    """
    @functools.wraps(handler)
    def wrapper(*args, **kwargs):
        try:
            return handler(*args, **kwargs)
        except Exception as e:
            logger.exception("%s failed: %s", action, e)
            show = notify
            if show is None:
                from nicegui import ui
                show = ui.notify
            show(HANDLER_ERROR_MESSAGE, type='negative')
            return None

    return wrapper
