# studiofolio/models/types.py
"""
Core data types for the Studiofolio landing page.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional


class ServiceColor(Enum):
    """Accent colors recognized by the services grid"""
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    GREEN = "green"
    ORANGE = "orange"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ServiceColor"]:
        """Map a raw color tag to an enum member, None when unrecognized."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class GalleryItem:
    """
    One portfolio entry.

    Only id/title/category/description are required; the rest is shown
    by the full project detail view when present.
    """
    id: int
    title: str
    category: str
    description: str

    full_description: str = ""
    challenge: str = ""
    solution: str = ""
    services: tuple[str, ...] = ()
    client: str = ""
    duration: str = ""
    year: str = ""
    cover_image: Optional[str] = None
    images: tuple[str, ...] = ()

    @property
    def has_gallery(self) -> bool:
        """True when the item can be shown in a carousel"""
        return len(self.images) > 0

    @property
    def thumbnail(self) -> Optional[str]:
        """Cover image, or the first gallery image"""
        if self.cover_image:
            return self.cover_image
        return self.images[0] if self.images else None


@dataclass(frozen=True)
class Service:
    """A named offering that groups a subset of gallery items"""
    id: str
    name: str
    title: str
    description: str
    color_tag: str = ""
    projects: tuple[GalleryItem, ...] = ()

    @property
    def color(self) -> Optional[ServiceColor]:
        """Recognized accent color (None means no visual treatment)"""
        return ServiceColor.parse(self.color_tag)


@dataclass(frozen=True)
class Stat:
    """Counter shown in the hero section (e.g. "120+ projects")"""
    end: int
    label: str
    suffix: str = ""


@dataclass
class ContactFormData:
    """Mutable contact form record, edited on every keystroke"""
    name: str = ""
    email: str = ""
    phone: str = ""
    service: str = ""
    message: str = ""

    def update(self, field_name: str, value: str) -> None:
        """Set a single field by name"""
        if field_name not in self.field_names():
            raise KeyError(f"Unknown contact form field: {field_name}")
        setattr(self, field_name, value)

    def clear(self) -> None:
        """Reset every field to empty"""
        for name in self.field_names():
            setattr(self, name, "")

    def missing(self, required: tuple[str, ...]) -> list[str]:
        """Names of required fields that are empty or whitespace only"""
        return [name for name in required if not getattr(self, name, "").strip()]

    def is_empty(self) -> bool:
        return all(not getattr(self, name) for name in self.field_names())

    def to_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in self.field_names()}

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


@dataclass
class SubmissionResult:
    """Outcome of one contact form submission"""
    ok: bool
    reason: str = ""
    status: Optional[int] = None

    @classmethod
    def success(cls, status: Optional[int] = None) -> "SubmissionResult":
        return cls(ok=True, status=status)

    @classmethod
    def failure(cls, reason: str, status: Optional[int] = None) -> "SubmissionResult":
        return cls(ok=False, reason=reason, status=status)


@dataclass(frozen=True)
class IntersectionEntry:
    """
    Viewport intersection report for one observed element.

    Produced by the browser bridge (IntersectionObserver) or by tests.
    """
    target: str
    ratio: float
    is_intersecting: bool

    @classmethod
    def from_event(cls, args: dict) -> "IntersectionEntry":
        """Build from the event payload emitted by the page script"""
        return cls(
            target=str(args.get("id", "")),
            ratio=float(args.get("ratio", 0.0) or 0.0),
            is_intersecting=bool(args.get("intersecting", False)),
        )


@dataclass(frozen=True)
class Section:
    """Named anchor on the landing page"""
    id: str
    label: str
    in_nav: bool = True
