# studiofolio/ui/components/project_modal.py
"""
Gallery lightbox.

A plain overlay rather than ui.dialog: the backdrop click handler must only
fire for clicks on the backdrop itself, never for clicks inside the content.
"""

from nicegui import ui

from studiofolio.services.navigation import BACKDROP_TARGET, ModalController
from studiofolio.ui.components.carousel_view import create_carousel_view
from studiofolio.ui.utils import guarded

# Tell backdrop clicks apart from clicks that bubbled up from the content
_BACKDROP_CLICK_JS = (
    f'(e) => emit(e.target === e.currentTarget ? "{BACKDROP_TARGET}" : "content")'
)


def create_project_modal(modal: ModalController) -> None:
    """Render the modal for the selected item; renders nothing while closed."""
    item = modal.item
    if item is None:
        return

    backdrop = ui.element('div').classes('modal-backdrop').props(
        'role="dialog" aria-modal="true" aria-labelledby="modal-title"'
    )
    backdrop.on(
        'click',
        guarded(lambda e: modal.handle_backdrop_click(e.args), "Modal backdrop click"),
        js_handler=_BACKDROP_CLICK_JS,
    )

    with backdrop:
        with ui.column().classes('modal-content gap-3'):
            ui.button(icon='close', on_click=guarded(modal.close, "Close modal")).props(
                'flat round aria-label="Close popup"'
            ).classes('modal-close')

            ui.label(item.title).classes('text-2xl font-semibold pr-10').props('id="modal-title"')
            ui.label(item.category).classes('text-sm text-gray-500')

            if item.has_gallery:
                create_carousel_view(
                    modal.state.carousel,
                    item.title,
                    on_previous=modal.previous_image,
                    on_next=modal.next_image,
                    on_jump=modal.show_image,
                )

            ui.label(item.description).classes('text-gray-700')

            ui.button(
                'View full project',
                on_click=guarded(lambda: modal.promote_to_full_detail(item), "View full project"),
            ).props('unelevated no-caps').classes('btn-pill self-start')
