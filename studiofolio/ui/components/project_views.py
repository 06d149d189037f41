# studiofolio/ui/components/project_views.py
"""
Full-page views: single project detail and a service's project list.
"""

from typing import Callable

from nicegui import ui

from studiofolio.models.types import GalleryItem, Service
from studiofolio.services.carousel import Carousel
from studiofolio.ui.components.carousel_view import create_carousel_view
from studiofolio.ui.components.landing import create_gallery_card
from studiofolio.ui.utils import guarded, project_meta


def create_project_detail(
    item: GalleryItem,
    carousel: Carousel,
    on_back: Callable[[], None],
    on_carousel_change: Callable[[], None],
) -> None:
    def step(move: Callable[[], int]) -> None:
        move()
        on_carousel_change()

    def jump(index: int) -> None:
        carousel.jump_to(index)
        on_carousel_change()

    with ui.element('section').classes('page-section'):
        with ui.column().classes('section-inner gap-6'):
            ui.button('Back to projects', icon='arrow_back', on_click=guarded(on_back, "Back to projects")) \
                .props('flat no-caps').classes('self-start')

            ui.label(item.category).classes('text-sm text-gray-500 uppercase')
            ui.label(item.title).classes('text-5xl font-light')

            meta = project_meta(item)
            if meta:
                with ui.row().classes('gap-12'):
                    for label, value in meta:
                        with ui.column().classes('gap-0'):
                            ui.label(label).classes('detail-meta-label')
                            ui.label(value).classes('font-medium')

            if item.has_gallery:
                create_carousel_view(
                    carousel,
                    item.title,
                    on_previous=lambda: step(carousel.previous),
                    on_next=lambda: step(carousel.next),
                    on_jump=jump,
                )

            ui.label(item.full_description or item.description).classes('text-lg text-gray-700')

            with ui.row().classes('w-full gap-12'):
                if item.challenge:
                    with ui.column().classes('flex-1 min-w-[16rem]'):
                        ui.label('The challenge').classes('text-xl font-medium')
                        ui.label(item.challenge).classes('text-gray-600')
                if item.solution:
                    with ui.column().classes('flex-1 min-w-[16rem]'):
                        ui.label('Our solution').classes('text-xl font-medium')
                        ui.label(item.solution).classes('text-gray-600')

            if item.services:
                with ui.row().classes('gap-2'):
                    for tag in item.services:
                        ui.label(tag).classes('tag')


def create_service_project_list(
    service: Service,
    on_back: Callable[[], None],
    on_view_project: Callable[[GalleryItem], None],
) -> None:
    with ui.element('section').classes('page-section'):
        with ui.column().classes('section-inner gap-6'):
            ui.button('Back to services', icon='arrow_back', on_click=guarded(on_back, "Back to services")) \
                .props('flat no-caps').classes('self-start')
            ui.label(service.name).classes('text-5xl font-light')
            ui.label(service.description).classes('text-lg text-gray-600')

            if not service.projects:
                ui.label('No projects yet.').classes('text-gray-500')
                return

            with ui.element('div').classes('gallery-grid'):
                for item in service.projects:
                    create_gallery_card(item, on_view_project)
