# studiofolio/ui/components/landing.py
"""
Landing view sections: header, hero (with counters), services, work gallery.

Animated elements are handed back to the app through `observe_reveal` /
`observe_counter` so that their controllers live with the app state.
"""

from typing import Callable, Optional

from nicegui import ui

from studiofolio.models.catalog import SECTIONS, STATS
from studiofolio.models.types import GalleryItem, Service, Stat
from studiofolio.ui.styles import SERVICE_ACCENT_CLASSES
from studiofolio.ui.utils import guarded

ObserveReveal = Callable[[ui.element, str], None]
ObserveCounter = Callable[[ui.label, Stat, str], None]


def create_header(studio_name: str, on_navigate: Callable[[Optional[str]], None]) -> None:
    """Fixed top navigation. Works from every view."""
    with ui.element('nav').classes('site-header w-full'):
        with ui.row().classes('section-inner h-full items-center justify-between px-6'):
            logo = ui.label(studio_name).classes('site-logo').props('role="link" tabindex="0"')
            logo.on('click', guarded(lambda: on_navigate(None), "Navigate to top"))
            with ui.row().classes('gap-8 gt-sm'):
                for section in SECTIONS:
                    if not section.in_nav:
                        continue
                    link = ui.label(section.label).classes('nav-link').props('role="link" tabindex="0"')
                    link.on('click', guarded(lambda _, sid=section.id: on_navigate(sid), "Navigate to section"))


def create_hero(
    on_navigate: Callable[[Optional[str]], None],
    observe_reveal: ObserveReveal,
    observe_counter: ObserveCounter,
) -> None:
    with ui.element('section').classes('page-section hero'):
        ui.link_target('top')
        with ui.column().classes('section-inner items-center reveal') as inner:
            with ui.element('h1').classes('hero-title'):
                ui.label('Web Design &')
                ui.label('Social Content').classes('text-gray-500')
            ui.label(
                'We create stunning digital experiences and engaging social media content '
                'that connects brands with their audience.'
            ).classes('hero-subtitle')
            ui.button('Start Your Project', on_click=guarded(lambda: on_navigate('contact'), "Start your project")) \
                .props('unelevated no-caps').classes('btn-pill')

            with ui.row().classes('w-full justify-center gap-16 mt-16'):
                for index, stat in enumerate(STATS):
                    with ui.column().classes('items-center gap-1'):
                        value = ui.label(f'0{stat.suffix}').classes('stat-value')
                        ui.label(stat.label).classes('stat-label')
                    observe_counter(value, stat, f'stat-{index}')
    observe_reveal(inner, 'hero')


def create_services_section(
    services: tuple[Service, ...],
    on_view_service: Callable[[Service], None],
    observe_reveal: ObserveReveal,
) -> None:
    with ui.element('section').classes('page-section alt'):
        ui.link_target('services')
        with ui.column().classes('section-inner reveal') as inner:
            ui.label('Our Services').classes('section-title w-full')
            with ui.row().classes('w-full gap-12 justify-center'):
                for service in services:
                    _service_card(service, on_view_service)
    observe_reveal(inner, 'services')


def _service_card(service: Service, on_view_service: Callable[[Service], None]) -> None:
    # Unrecognized colors render without an accent
    accent = SERVICE_ACCENT_CLASSES.get(service.color.value, '') if service.color else ''
    with ui.column().classes(f'service-card flex-1 min-w-[18rem] gap-4 {accent}'):
        ui.element('div').classes('service-icon')
        ui.label(service.name).classes('text-2xl font-medium')
        ui.label(service.title).classes('text-sm text-gray-500')
        ui.label(service.description).classes('text-gray-600')
        ui.button(
            f'View {len(service.projects)} projects',
            on_click=guarded(lambda _, s=service: on_view_service(s), "View service projects"),
        ).props('flat no-caps').classes('self-start')


def create_gallery_section(
    items: tuple[GalleryItem, ...],
    on_select: Callable[[GalleryItem], None],
    observe_reveal: ObserveReveal,
) -> None:
    with ui.element('section').classes('page-section'):
        ui.link_target('work')
        with ui.column().classes('section-inner reveal') as inner:
            ui.label('Our Work').classes('section-title w-full')
            with ui.element('div').classes('gallery-grid'):
                for item in items:
                    create_gallery_card(item, on_select)
    observe_reveal(inner, 'work')


def create_gallery_card(item: GalleryItem, on_select: Callable[[GalleryItem], None]) -> None:
    """Clickable thumbnail (Enter key works too)"""
    with ui.column().classes('gallery-card gap-2').props(
        f'tabindex="0" role="button" aria-label="View details of {item.title}"'
    ) as card:
        if item.thumbnail:
            ui.image(item.thumbnail).classes('gallery-thumb')
        else:
            ui.element('div').classes('gallery-thumb')
        ui.label(item.title).classes('gallery-title text-lg font-medium')
        ui.label(item.category).classes('text-sm text-gray-500')
    select = guarded(lambda _, i=item: on_select(i), "Open project")
    card.on('click', select)
    card.on('keydown.enter', select)
