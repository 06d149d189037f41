# studiofolio/services/navigation.py
"""
In-page navigation.

- ViewRouter: Landing / ProjectDetail / ServiceProjectList state machine with
  deferred scroll-to-section after returning to the landing view
- ModalController: gallery lightbox (open/close/Escape/backdrop, promote to
  full detail view)

Both operate on the shared AppState and report scrolling through a Scroller,
so they run without a browser in tests.
"""

import logging
from typing import Callable, Optional, Protocol

from studiofolio.models.catalog import GALLERY_ITEMS, SERVICES, find_item, find_service
from studiofolio.models.types import GalleryItem, Service
from studiofolio.services.scheduler import Scheduler, TimerHandle
from studiofolio.ui.state import AppState, ViewState

logger = logging.getLogger(__name__)

# Delay before a pending scroll runs, so the landing sections exist in the DOM
DEFAULT_DEFERRED_SCROLL_DELAY_SEC = 0.1

ESCAPE_KEY = "Escape"
BACKDROP_TARGET = "backdrop"


class Scroller(Protocol):
    """Document scrolling surface (the browser page at runtime)"""

    def scroll_to_section(self, section_id: str) -> None: ...

    def scroll_to_top(self, smooth: bool = False) -> None: ...


class ViewRouter:
    """
    Selects which top-level view is rendered.

    Views:
        LANDING                  the one-page site (hero/services/work/contact)
        PROJECT_DETAIL           full page for one GalleryItem
        SERVICE_PROJECT_LIST     all projects of one Service

    Sections only exist while LANDING is rendered, so scrolling to a section
    from another view is recorded in `state.pending_scroll` and executed
    once, after `deferred_scroll_delay` seconds, by a scheduler timer.

    Leaving LANDING before that timer fires cancels the timer and drops the
    token: a scroll never runs against a view the user already left. A newer
    navigation on LANDING also drops it.
    """

    def __init__(
        self,
        state: AppState,
        scroller: Scroller,
        scheduler: Scheduler,
        deferred_scroll_delay: float = DEFAULT_DEFERRED_SCROLL_DELAY_SEC,
    ):
        self.state = state
        self.scroller = scroller
        self.scheduler = scheduler
        self.deferred_scroll_delay = deferred_scroll_delay
        self._scroll_timer: Optional[TimerHandle] = None
        self._listeners: list[Callable[[ViewState], None]] = []

    @property
    def view(self) -> ViewState:
        return self.state.view

    @property
    def has_scheduled_scroll(self) -> bool:
        return self._scroll_timer is not None

    def on_change(self, callback: Callable[[ViewState], None]) -> None:
        """Register a callback fired after every view transition"""
        self._listeners.append(callback)

    # -- transitions -------------------------------------------------------

    def view_project(self, item: GalleryItem) -> None:
        """Show the full detail page of `item` (from any view)."""
        self._drop_pending_scroll()
        self.state.selected_item = None
        self.state.current_service = None
        self.state.current_project = item
        self.state.detail_carousel.bind(item)
        self._set_view(ViewState.PROJECT_DETAIL)
        self.scroller.scroll_to_top()

    def view_service_list(self, service: Service) -> None:
        """Show every project of `service` (from any view)."""
        self._drop_pending_scroll()
        self.state.selected_item = None
        self.state.current_project = None
        self.state.current_service = service
        self._set_view(ViewState.SERVICE_PROJECT_LIST)
        self.scroller.scroll_to_top()

    def view_project_by_id(self, item_id: int) -> GalleryItem:
        """Resolve a catalog id and show it. Raises KeyError when unknown."""
        item = find_item(item_id, GALLERY_ITEMS)
        self.view_project(item)
        return item

    def view_service_by_id(self, service_id: str) -> Service:
        """Resolve a service id and show its project list. Raises KeyError when unknown."""
        service = find_service(service_id, SERVICES)
        self.view_service_list(service)
        return service

    def navigate_to(self, section_id: Optional[str] = None) -> None:
        """Header/footer navigation.

        On the landing view scroll immediately (smooth). From any other view
        go back to landing first; a section target is deferred until the
        landing view has rendered, a top-of-page target is immediate.
        """
        if self.state.view == ViewState.LANDING:
            # A newer target supersedes a deferred scroll still queued
            self._drop_pending_scroll()
            if section_id:
                self.scroller.scroll_to_section(section_id)
            else:
                self.scroller.scroll_to_top(smooth=True)
            return

        if section_id:
            self._return_to_landing(section_id)
        else:
            self._return_to_landing(None)
            self.scroller.scroll_to_top()

    def back_to_projects(self) -> None:
        self._return_to_landing("work")

    def back_to_services(self) -> None:
        self._return_to_landing("services")

    def teardown(self) -> None:
        """Cancel the pending scroll timer (client disconnected)."""
        self._cancel_scroll_timer()

    # -- deferred scroll ---------------------------------------------------

    def _return_to_landing(self, section_id: Optional[str]) -> None:
        self.state.pending_scroll = section_id
        self.state.current_project = None
        self.state.current_service = None
        self._set_view(ViewState.LANDING)
        self._schedule_pending_scroll()

    def _schedule_pending_scroll(self) -> None:
        if self.state.pending_scroll is None or self.state.view != ViewState.LANDING:
            return
        self._cancel_scroll_timer()
        self._scroll_timer = self.scheduler.call_later(
            self.deferred_scroll_delay, self._run_pending_scroll
        )
        logger.debug("Deferred scroll scheduled: %s", self.state.pending_scroll)

    def _run_pending_scroll(self) -> None:
        self._scroll_timer = None
        section_id = self.state.pending_scroll
        if section_id is None or self.state.view != ViewState.LANDING:
            return
        self.state.pending_scroll = None
        self.scroller.scroll_to_section(section_id)

    def _drop_pending_scroll(self) -> None:
        if self.state.pending_scroll is not None:
            logger.debug("Dropping deferred scroll to %s", self.state.pending_scroll)
        self._cancel_scroll_timer()
        self.state.pending_scroll = None

    def _cancel_scroll_timer(self) -> None:
        if self._scroll_timer is not None:
            self._scroll_timer.cancel()
            self._scroll_timer = None

    def _set_view(self, view: ViewState) -> None:
        previous = self.state.view
        self.state.view = view
        logger.debug("View: %s -> %s", previous.value, view.value)
        for callback in self._listeners:
            callback(view)


class ModalController:
    """
    Gallery lightbox: Closed or Open(item).

    Closes on the close button, a click on the backdrop (never on the inner
    content) or Escape. Escape is listened for once at the app shell and is a
    no-op while closed.
    """

    def __init__(self, state: AppState, router: ViewRouter):
        self.state = state
        self.router = router
        self._listeners: list[Callable[[Optional[GalleryItem]], None]] = []

    @property
    def is_open(self) -> bool:
        return self.state.selected_item is not None

    @property
    def item(self) -> Optional[GalleryItem]:
        return self.state.selected_item

    def on_change(self, callback: Callable[[Optional[GalleryItem]], None]) -> None:
        self._listeners.append(callback)

    def open(self, item: GalleryItem) -> None:
        self.state.selected_item = item
        self.state.carousel.bind(item)
        self.state.carousel.reset()
        self._notify()

    def close(self) -> bool:
        """Close the modal. Returns False if it was already closed."""
        if self.state.selected_item is None:
            return False
        self.state.selected_item = None
        self._notify()
        return True

    def handle_backdrop_click(self, target: str) -> bool:
        """Click inside the overlay; only the backdrop itself closes it."""
        if target != BACKDROP_TARGET:
            return False
        return self.close()

    def handle_key(self, key: str) -> bool:
        """Global keydown. Returns True if the key closed the modal."""
        if key != ESCAPE_KEY:
            return False
        return self.close()

    def promote_to_full_detail(self, item: Optional[GalleryItem] = None) -> None:
        """'View full project': close the modal and open the detail view."""
        item = item or self.state.selected_item
        if item is None:
            logger.warning("promote_to_full_detail called with no selected item")
            return
        self.close()
        self.router.view_project(item)

    # Carousel shortcuts for the modal's image viewer

    def next_image(self) -> int:
        index = self.state.carousel.next()
        self._notify()
        return index

    def previous_image(self) -> int:
        index = self.state.carousel.previous()
        self._notify()
        return index

    def show_image(self, index: int) -> int:
        index = self.state.carousel.jump_to(index)
        self._notify()
        return index

    def _notify(self) -> None:
        for callback in self._listeners:
            callback(self.state.selected_item)
