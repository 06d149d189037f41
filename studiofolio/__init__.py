# studiofolio/__init__.py
"""
Studiofolio - landing page for a small web design & social content studio.

A NiceGUI application: hero, services, project gallery with lightbox,
contact form and a click-to-chat link.
"""

from pathlib import Path


def _get_version() -> str:
    """Read the version from pyproject.toml, falling back to the release constant."""
    try:
        import tomllib

        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
            return data.get("project", {}).get("version", "0.0.0")
    except (OSError, ValueError):
        pass

    return "0.1.0"


__version__ = _get_version()
__app_name__ = "Studiofolio"
