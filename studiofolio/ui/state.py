# studiofolio/ui/state.py
"""
Application state management for Studiofolio.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from studiofolio.models.types import ContactFormData, GalleryItem, Service
from studiofolio.services.carousel import Carousel

# Module logger
logger = logging.getLogger(__name__)


class ViewState(Enum):
    """Top-level page views"""
    LANDING = "landing"
    PROJECT_DETAIL = "project_detail"
    SERVICE_PROJECT_LIST = "service_project_list"


class SubmitState(Enum):
    """Contact form submission states"""
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class AppState:
    """
    Application state.
    Single source of truth for the page; one instance per browser client.

    Focus pointers (selected_item, current_project, current_service) reference
    entries of the static catalog and are never copies.
    """
    # Current view
    view: ViewState = ViewState.LANDING
    current_project: Optional[GalleryItem] = None      # ProjectDetail focus
    current_service: Optional[Service] = None          # ServiceProjectList focus

    # Gallery modal
    selected_item: Optional[GalleryItem] = None
    carousel: Carousel = field(default_factory=Carousel)
    detail_carousel: Carousel = field(default_factory=Carousel)

    # Section to scroll to once the landing view has rendered
    pending_scroll: Optional[str] = None

    # Contact form
    form: ContactFormData = field(default_factory=ContactFormData)
    submit_state: SubmitState = SubmitState.IDLE
    submit_message: str = ""
    submit_message_is_error: bool = False

    def is_modal_open(self) -> bool:
        return self.selected_item is not None

    def is_landing(self) -> bool:
        return self.view == ViewState.LANDING

    def is_submitting(self) -> bool:
        return self.submit_state == SubmitState.SUBMITTING

    def can_submit(self) -> bool:
        """Submit control is disabled while a request is in flight"""
        return self.submit_state != SubmitState.SUBMITTING

    def reset_form_state(self) -> None:
        """Reset contact form to its mount state"""
        self.form.clear()
        self.submit_state = SubmitState.IDLE
        self.submit_message = ""
        self.submit_message_is_error = False

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable snapshot (focus pointers as ids)"""
        return {
            "view": self.view.value,
            "current_project": self.current_project.id if self.current_project else None,
            "current_service": self.current_service.id if self.current_service else None,
            "selected_item": self.selected_item.id if self.selected_item else None,
            "carousel_index": self.carousel.index,
            "detail_carousel_index": self.detail_carousel.index,
            "pending_scroll": self.pending_scroll,
            "submit_state": self.submit_state.value,
            "submit_message": self.submit_message,
            "form": self.form.to_dict(),
        }
