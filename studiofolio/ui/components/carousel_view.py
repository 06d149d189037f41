# studiofolio/ui/components/carousel_view.py
"""
Image viewer bound to a Carousel cursor: current image, prev/next, one dot per image.
"""

from typing import Callable

from nicegui import ui

from studiofolio.services.carousel import Carousel
from studiofolio.ui.utils import guarded


def create_carousel_view(
    carousel: Carousel,
    title: str,
    on_previous: Callable[[], None],
    on_next: Callable[[], None],
    on_jump: Callable[[int], None],
) -> None:
    image = carousel.current_image
    if image is None:
        ui.element('div').classes('carousel-image')
        return

    with ui.column().classes('w-full gap-3'):
        with ui.element('div').classes('relative w-full'):
            ui.image(image).classes('carousel-image').props(
                f'alt="{title} - image {carousel.index + 1} of {len(carousel)}"'
            )
            if carousel.has_multiple:
                ui.button(icon='chevron_left', on_click=guarded(on_previous, "Carousel previous")).props(
                    'round unelevated color=white text-color=black aria-label="Previous image"'
                ).classes('absolute left-2 top-1/2 -translate-y-1/2')
                ui.button(icon='chevron_right', on_click=guarded(on_next, "Carousel next")).props(
                    'round unelevated color=white text-color=black aria-label="Next image"'
                ).classes('absolute right-2 top-1/2 -translate-y-1/2')

        if carousel.has_multiple:
            with ui.row().classes('w-full justify-center gap-2'):
                for index in range(len(carousel)):
                    dot_class = 'carousel-dot active' if index == carousel.index else 'carousel-dot'
                    dot = ui.element('div').classes(dot_class).props(
                        f'role="button" aria-label="Show image {index + 1}"'
                    )
                    dot.on('click', guarded(lambda _, i=index: on_jump(i), "Carousel jump"))
