# studiofolio/services/__init__.py
"""
Controller layer for Studiofolio.

Services are lazy-loaded so that importing the package stays cheap.
Use explicit imports like:
    from studiofolio.services.navigation import ViewRouter
"""

# Lazy-loaded services via __getattr__
_LAZY_IMPORTS = {
    'ScrollReveal': 'animation',
    'CountUp': 'animation',
    'Carousel': 'carousel',
    'ViewRouter': 'navigation',
    'ModalController': 'navigation',
    'ContactFormController': 'contact_form',
    'HttpFormTransport': 'contact_form',
    'AsyncioScheduler': 'scheduler',
}

# Submodules that can be accessed via __getattr__ (for patching support)
_SUBMODULES = {'animation', 'carousel', 'navigation', 'contact_form', 'scheduler', 'exceptions'}


def __getattr__(name: str):
    """Lazy-load service modules on first access."""
    import importlib
    if name in _SUBMODULES:
        return importlib.import_module(f'.{name}', __package__)
    if name in _LAZY_IMPORTS:
        module_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(f'.{module_name}', __package__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_LAZY_IMPORTS)
