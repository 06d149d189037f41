# studiofolio/ui/components/footer.py
"""
Footer and floating click-to-chat button.
"""

from nicegui import ui

from studiofolio.ui.utils import build_whatsapp_link, copyright_line


def create_footer(studio_name: str) -> None:
    with ui.element('footer').classes('site-footer'):
        ui.label(copyright_line(studio_name))


def create_whatsapp_button(number: str, message: str) -> None:
    """Opens WhatsApp in a new tab; hidden when no number is configured."""
    if not number:
        return
    with ui.link(target=build_whatsapp_link(number, message), new_tab=True) \
            .classes('whatsapp-float').props('aria-label="Chat on WhatsApp"'):
        ui.icon('chat').classes('text-2xl')
