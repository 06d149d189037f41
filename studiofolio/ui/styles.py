# studiofolio/ui/styles.py
"""
Page styles for Studiofolio.

CSS is loaded from external file for better editor support.
"""

from pathlib import Path

_CSS_FILE = Path(__file__).parent / "styles.css"


def _load_css() -> str:
    """Load CSS from external file."""
    if _CSS_FILE.exists():
        return _CSS_FILE.read_text(encoding="utf-8")
    return ""


# Cache the loaded CSS at module import time
COMPLETE_CSS = _load_css()

# Accent classes per ServiceColor value; unknown colors get no accent
SERVICE_ACCENT_CLASSES: dict[str, str] = {
    "blue": "accent-blue",
    "purple": "accent-purple",
    "pink": "accent-pink",
    "green": "accent-green",
    "orange": "accent-orange",
}
