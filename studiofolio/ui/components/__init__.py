# studiofolio/ui/components/__init__.py
"""
UI components for Studiofolio.

Use explicit imports like:
    from studiofolio.ui.components.landing import create_hero
"""

# Lazy-loaded components via __getattr__
_LAZY_IMPORTS = {
    "create_header": "landing",
    "create_hero": "landing",
    "create_services_section": "landing",
    "create_gallery_section": "landing",
    "create_project_modal": "project_modal",
    "create_project_detail": "project_views",
    "create_service_project_list": "project_views",
    "create_contact_form": "contact_panel",
    "create_contact_section": "contact_panel",
    "create_footer": "footer",
    "create_whatsapp_button": "footer",
}


def __getattr__(name: str):
    """Lazy-load component modules on first access."""
    if name in _LAZY_IMPORTS:
        module_name = _LAZY_IMPORTS[name]
        import importlib

        module = importlib.import_module(f".{module_name}", __package__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_LAZY_IMPORTS)
