# studiofolio/ui/components/contact_panel.py
"""
Contact section: form fields bound to AppState.form, submit button, status message.
"""

import logging
from typing import Awaitable, Callable

from nicegui import ui

from studiofolio.models.catalog import SERVICE_OPTIONS
from studiofolio.ui.state import AppState
from studiofolio.ui.utils import HANDLER_ERROR_MESSAGE, guarded

logger = logging.getLogger(__name__)


def create_contact_form(
    state: AppState,
    on_field_change: Callable[[str, str], None],
    on_submit: Callable[[], Awaitable[None]],
) -> None:
    """Form body. Rebuilt (refreshable) whenever the submit state changes."""
    form = state.form
    submitting = state.is_submitting()

    with ui.column().classes('contact-form gap-4'):
        ui.input(
            'Name',
            value=form.name,
            on_change=guarded(lambda e: on_field_change('name', e.value or ''), "Edit name"),
        ).props('outlined').classes('w-full')
        ui.input(
            'Email',
            value=form.email,
            on_change=guarded(lambda e: on_field_change('email', e.value or ''), "Edit email"),
        ).props('outlined type=email').classes('w-full')
        ui.input(
            'Phone (optional)',
            value=form.phone,
            on_change=guarded(lambda e: on_field_change('phone', e.value or ''), "Edit phone"),
        ).props('outlined type=tel').classes('w-full')
        ui.select(
            list(SERVICE_OPTIONS),
            label='Service Interested In',
            value=form.service or None,
            on_change=guarded(lambda e: on_field_change('service', e.value or ''), "Edit service"),
        ).props('outlined').classes('w-full')
        ui.textarea(
            'Message',
            value=form.message,
            on_change=guarded(lambda e: on_field_change('message', e.value or ''), "Edit message"),
        ).props('outlined rows=4').classes('w-full')

        async def handle_submit():
            try:
                await on_submit()
            except Exception as ex:
                logger.exception("Contact form submit error: %s", ex)
                ui.notify(HANDLER_ERROR_MESSAGE, type='negative')

        button = ui.button(
            'Sending...' if submitting else 'Send Message',
            on_click=handle_submit,
        ).props('unelevated no-caps').classes('btn-pill w-full')
        if submitting:
            button.props('disable loading')

        if state.submit_message:
            message_class = 'submit-message error' if state.submit_message_is_error else 'submit-message'
            ui.label(state.submit_message).classes(f'{message_class} w-full').props('role="status"')


def create_contact_section(render_form: Callable[[], None], observe_reveal) -> None:
    with ui.element('section').classes('page-section alt'):
        ui.link_target('contact')
        with ui.column().classes('section-inner items-center reveal') as inner:
            ui.label('Contact Us').classes('section-title w-full')
            render_form()
    observe_reveal(inner, 'contact')
