# studiofolio/ui/app.py
from __future__ import annotations

"""
Studiofolio - one-page studio site with in-page views.
Landing (hero/services/work/contact), project detail, service project list.
"""

import logging
import re
from typing import Optional

from studiofolio.config.settings import AppSettings, get_default_settings_path
from studiofolio.models.catalog import GALLERY_ITEMS, SERVICES, validate_catalog
from studiofolio.models.types import IntersectionEntry, Stat
from studiofolio.services.animation import CountUp, ScrollReveal
from studiofolio.services.contact_form import ContactFormController, FormTransport, create_transport
from studiofolio.services.navigation import ModalController, Scroller, ViewRouter
from studiofolio.services.scheduler import AsyncioScheduler, Scheduler
from studiofolio.ui.scripts import observe_props, scroll_to_section_js, scroll_to_top_js
from studiofolio.ui.state import AppState, ViewState
from studiofolio.ui.utils import guarded

# Module logger
logger = logging.getLogger(__name__)

# Minimum supported NiceGUI version (major, minor, patch)
MIN_NICEGUI_VERSION = (3, 0, 0)

_RE_VERSION = re.compile(r'^(\d+)(?:\.(\d+))?(?:\.(\d+))?')

# NiceGUI imports - deferred to run_app() so controllers and state can be
# imported (and tested) without the web stack
nicegui = None
ui = None
nicegui_app = None


def _ensure_nicegui_version() -> None:
    """Fail fast with a clear message when the installed NiceGUI is too old.

    Must be called after NiceGUI is imported (inside run_app()).
    """
    version_str = getattr(nicegui, '__version__', '')
    match = _RE_VERSION.match(version_str)
    if not match:
        logger.warning(
            "Unable to parse NiceGUI version '%s'; proceeding without check", version_str
        )
        return

    version_parts = tuple(int(part or 0) for part in match.groups())
    if version_parts < MIN_NICEGUI_VERSION:
        raise RuntimeError(
            f"NiceGUI>={'.'.join(str(p) for p in MIN_NICEGUI_VERSION)} is required; "
            f"found {version_str}. Please upgrade NiceGUI."
        )


class BrowserScroller:
    """Scroller that runs scrolling JS in one connected browser client."""

    def __init__(self, client=None):
        self._client = client

    def scroll_to_section(self, section_id: str) -> None:
        self._run(scroll_to_section_js(section_id))

    def scroll_to_top(self, smooth: bool = False) -> None:
        self._run(scroll_to_top_js(smooth))

    def _run(self, code: str) -> None:
        if self._client is None:
            logger.debug("No client attached; skipping scroll: %s", code)
            return
        # Fire-and-forget: the response is not needed
        self._client.run_javascript(code)


class StudioApp:
    """One browser client's page: state, controllers and their rendering."""

    def __init__(
        self,
        settings: AppSettings,
        transport: Optional[FormTransport] = None,
        scheduler: Optional[Scheduler] = None,
        scroller: Optional[Scroller] = None,
    ):
        self.settings = settings
        self.state = AppState()
        self.scheduler = scheduler or AsyncioScheduler()
        self.scroller = scroller or BrowserScroller()

        self.router = ViewRouter(
            self.state,
            self.scroller,
            self.scheduler,
            deferred_scroll_delay=settings.deferred_scroll_delay,
        )
        self.modal = ModalController(self.state, self.router)
        self.contact = ContactFormController(
            self.state,
            transport or create_transport(settings),
            self.scheduler,
            success_message_seconds=settings.success_message_seconds,
            required_fields=tuple(settings.form_required_fields),
        )

        # Animations of the currently mounted landing view
        self._reveals: dict[str, ScrollReveal] = {}
        self._counters: dict[str, CountUp] = {}

        # Refreshable panels (set in create_ui)
        self._view_panel = None
        self._modal_panel = None
        self._contact_panel = None

        self.router.on_change(self._on_view_change)
        self.modal.on_change(lambda _item: self._refresh(self._modal_panel))
        self.contact.on_change(lambda _state: self._refresh(self._contact_panel))

    # =========================================================================
    # Event handlers (framework-independent)
    # =========================================================================

    def handle_key(self, key: str) -> bool:
        """Global keydown; Escape closes the modal when one is open."""
        return self.modal.handle_key(key)

    def handle_intersection(self, args: dict) -> None:
        """Route an intersection report from the page script to its animation."""
        entry = IntersectionEntry.from_event(args)
        reveal = self._reveals.get(entry.target)
        if reveal is not None:
            reveal.handle_entry(entry)
        counter = self._counters.get(entry.target)
        if counter is not None:
            counter.handle_entry(entry)

    def handle_field_change(self, field_name: str, value: str) -> None:
        self.contact.update_field(field_name, value)

    async def handle_submit(self) -> None:
        result = await self.contact.submit()
        if result is None or result.ok:
            return
        if ui is not None and self.state.submit_message:
            ui.notify(self.state.submit_message, type='negative')

    def observe_reveal(self, element, target: str) -> ScrollReveal:
        """Bind a fade-in section to a ScrollReveal for this mount."""
        reveal = ScrollReveal(
            target,
            threshold=self.settings.reveal_threshold,
            root_margin=self.settings.reveal_root_margin,
        )
        reveal.on_visible(lambda: element.classes(add='reveal-visible'))
        reveal.attach()
        element.props(observe_props(target, reveal.threshold, reveal.root_margin))
        self._reveals[target] = reveal
        return reveal

    def observe_counter(self, label, stat: Stat, target: str) -> CountUp:
        """Bind a stat label to a CountUp for this mount."""
        counter = CountUp(
            target,
            stat.end,
            self.scheduler,
            suffix=stat.suffix,
            duration_ms=self.settings.count_up_duration_ms,
            threshold=self.settings.count_up_threshold,
        )
        counter.on_update(lambda _value: label.set_text(counter.display))
        counter.attach()
        label.props(observe_props(target, counter.threshold))
        self._counters[target] = counter
        return counter

    def reset_animations(self) -> None:
        """Cancel animations of the previous mount (view re-render or teardown)."""
        for counter in self._counters.values():
            counter.cancel()
        for reveal in self._reveals.values():
            reveal.detach()
        self._counters.clear()
        self._reveals.clear()

    def teardown(self) -> None:
        """Client disconnected: stop timers and frame loops."""
        self.reset_animations()
        self.router.teardown()
        self.contact.teardown()
        logger.debug("Client state torn down")

    # =========================================================================
    # Rendering
    # =========================================================================

    def create_ui(self) -> None:
        """Create the page"""
        from studiofolio.ui.components.footer import create_footer, create_whatsapp_button
        from studiofolio.ui.components.landing import create_header
        from studiofolio.ui.components.project_modal import create_project_modal
        from studiofolio.ui.scripts import INTERSECTION_BRIDGE_JS, INTERSECTION_EVENT
        from studiofolio.ui.styles import COMPLETE_CSS

        ui.add_head_html('<meta name="viewport" content="width=device-width, initial-scale=1.0">')
        ui.add_head_html(f'<style>{COMPLETE_CSS}</style>')
        ui.add_body_html(INTERSECTION_BRIDGE_JS)

        ui.on(INTERSECTION_EVENT, guarded(lambda e: self.handle_intersection(e.args), "Intersection event"))

        # Escape closes the modal regardless of which element has focus
        ui.keyboard(on_key=guarded(self._on_keyboard, "Keyboard handler"), ignore=[])

        create_header(self.settings.studio_name, self.router.navigate_to)

        @ui.refreshable
        def view_panel():
            self._render_view()

        self._view_panel = view_panel
        view_panel()

        @ui.refreshable
        def modal_panel():
            create_project_modal(self.modal)

        self._modal_panel = modal_panel
        modal_panel()

        create_footer(self.settings.studio_name)
        create_whatsapp_button(self.settings.whatsapp_number, self.settings.whatsapp_message)

    def _render_view(self) -> None:
        from studiofolio.ui.components.project_views import (
            create_project_detail,
            create_service_project_list,
        )

        self.reset_animations()
        self._contact_panel = None

        view = self.state.view
        if view == ViewState.PROJECT_DETAIL and self.state.current_project is not None:
            create_project_detail(
                self.state.current_project,
                self.state.detail_carousel,
                on_back=self.router.back_to_projects,
                on_carousel_change=lambda: self._refresh(self._view_panel),
            )
        elif view == ViewState.SERVICE_PROJECT_LIST and self.state.current_service is not None:
            create_service_project_list(
                self.state.current_service,
                on_back=self.router.back_to_services,
                on_view_project=self.router.view_project,
            )
        else:
            self._render_landing()

    def _render_landing(self) -> None:
        from studiofolio.ui.components.contact_panel import create_contact_form, create_contact_section
        from studiofolio.ui.components.landing import (
            create_gallery_section,
            create_hero,
            create_services_section,
        )

        create_hero(self.router.navigate_to, self.observe_reveal, self.observe_counter)
        create_services_section(SERVICES, self.router.view_service_list, self.observe_reveal)
        create_gallery_section(GALLERY_ITEMS, self.modal.open, self.observe_reveal)

        @ui.refreshable
        def contact_panel():
            create_contact_form(self.state, self.handle_field_change, self.handle_submit)

        self._contact_panel = contact_panel
        create_contact_section(contact_panel, self.observe_reveal)

    def _on_view_change(self, _view: ViewState) -> None:
        # Transitions may also drop the modal selection
        self._refresh(self._view_panel)
        self._refresh(self._modal_panel)

    def _on_keyboard(self, e) -> None:
        if e.action.keydown:
            self.handle_key(e.key.name)

    @staticmethod
    def _refresh(panel) -> None:
        if panel is not None:
            panel.refresh()


def create_app(settings: Optional[AppSettings] = None, client=None) -> StudioApp:
    """Create the per-client application instance.

    Raises:
        ConfigurationError: form endpoint or encoding unusable
    """
    settings = settings or AppSettings.load(get_default_settings_path())
    return StudioApp(settings, scroller=BrowserScroller(client))


def check_configuration(settings: AppSettings) -> None:
    """Startup checks; raises ConfigurationError before the server starts."""
    validate_catalog()
    create_transport(settings)


def run_app(host: Optional[str] = None, port: Optional[int] = None):
    """Run the application.

    Args:
        host: Host to bind to (defaults to settings.host)
        port: Port to bind to (defaults to settings.port)
    """
    global nicegui, ui, nicegui_app

    import nicegui as _nicegui
    from nicegui import app as _nicegui_app, ui as _ui, Client

    nicegui = _nicegui
    ui = _ui
    nicegui_app = _nicegui_app
    _ensure_nicegui_version()

    settings = AppSettings.load(get_default_settings_path())
    check_configuration(settings)
    logger.info("Form endpoint: %s (%s)", settings.form_endpoint, settings.form_encoding)

    @ui.page('/')
    async def main_page(client: Client):
        studio = create_app(settings, client)
        client.on_disconnect(studio.teardown)
        studio.create_ui()

    ui.run(
        host=host or settings.host,
        port=port or settings.port,
        title=settings.studio_name,
        dark=False,
        reload=False,
        show=False,
    )
