# studiofolio/models/catalog.py
"""
Static catalogs: services, gallery items, hero stats and page sections.

Defined once at import time and never mutated; every view shares them.
"""

from typing import Iterable, Optional

from studiofolio.models.types import GalleryItem, Section, Service, Stat
from studiofolio.services.exceptions import ConfigurationError


def _images(slug: str, count: int) -> tuple[str, ...]:
    return tuple(f"https://picsum.photos/seed/{slug}-{i}/1200/800" for i in range(1, count + 1))


SECTIONS: tuple[Section, ...] = (
    Section("services", "Services"),
    Section("work", "Work"),
    Section("contact", "Contact"),
)

SECTION_IDS: frozenset[str] = frozenset(s.id for s in SECTIONS)

STATS: tuple[Stat, ...] = (
    Stat(end=120, label="Projects delivered", suffix="+"),
    Stat(end=45, label="Happy clients", suffix="+"),
    Stat(end=8, label="Years of experience"),
    Stat(end=100, label="Client satisfaction", suffix="%"),
)


WEB_DESIGN_PROJECTS: tuple[GalleryItem, ...] = (
    GalleryItem(
        id=1,
        title="Brand Identity",
        category="Web Design",
        description="Complete brand identity design for tech startup",
        full_description=(
            "A full identity system for an early-stage SaaS company: logo, "
            "typography, color palette and a marketing site built around it."
        ),
        challenge="The founders had a product but no visual language, and a launch in six weeks.",
        solution="A compact design system delivered alongside the site so the team could keep shipping pages.",
        services=("Branding", "Web Design", "Design System"),
        client="Lumen Labs",
        duration="6 weeks",
        year="2023",
        images=_images("brand-identity", 3),
    ),
    GalleryItem(
        id=3,
        title="E-commerce Site",
        category="Web Design",
        description="Modern e-commerce platform design",
        full_description=(
            "Storefront redesign for an independent homeware shop, focused on "
            "product photography and a shorter checkout."
        ),
        challenge="Mobile visitors abandoned the old checkout at the shipping step.",
        solution="A two-step checkout with inline shipping estimates and a sticky cart summary.",
        services=("Web Design", "UX", "E-commerce"),
        client="Casa Norte",
        duration="10 weeks",
        year="2024",
        images=_images("e-commerce", 3),
    ),
    GalleryItem(
        id=5,
        title="Portfolio Website",
        category="Web Design",
        description="Creative portfolio for photographer",
        full_description="A minimal, image-first portfolio with full-bleed galleries.",
        challenge="Large photo sets loaded slowly and buried the best work.",
        solution="Curated series pages with lazy-loaded, responsive images.",
        services=("Web Design", "Performance"),
        client="Marta Ruiz Photography",
        duration="4 weeks",
        year="2024",
        images=_images("portfolio", 4),
    ),
)

SOCIAL_MEDIA_PROJECTS: tuple[GalleryItem, ...] = (
    GalleryItem(
        id=2,
        title="Social Campaign",
        category="Social Media",
        description="Instagram campaign for fashion brand",
        full_description="Seasonal Instagram campaign with reels, carousels and stories.",
        challenge="Engagement had plateaued despite a growing follower count.",
        solution="Creator collaborations and a weekly behind-the-scenes format.",
        services=("Content Strategy", "Photography", "Reels"),
        client="Atelier Sol",
        duration="3 months",
        year="2023",
        images=_images("social-campaign", 3),
    ),
    GalleryItem(
        id=4,
        title="Content Series",
        category="Social Media",
        description="Weekly content series for fitness brand",
        full_description="A recurring workout-tips series produced in monthly batches.",
        challenge="The brand posted irregularly and without a recognizable format.",
        solution="A templated series with a fixed weekly slot and batch production days.",
        services=("Content Series", "Video", "Scheduling"),
        client="Pulse Gym",
        duration="Ongoing",
        year="2024",
        images=_images("content-series", 2),
    ),
    GalleryItem(
        id=6,
        title="Product Launch",
        category="Social Media",
        description="Social media launch campaign",
        full_description="Teaser-to-launch campaign for a new skincare line.",
        challenge="A new product with no audience two weeks before launch.",
        solution="A countdown teaser sequence paired with early-access signups.",
        services=("Launch Campaign", "Paid Social"),
        client="Verde Skin",
        duration="5 weeks",
        year="2024",
        images=_images("product-launch", 1),
    ),
)

SERVICES: tuple[Service, ...] = (
    Service(
        id="web-design",
        name="Web Design",
        title="Websites that convert",
        description=(
            "Custom websites that blend beautiful design with seamless functionality. "
            "From concept to launch, we build digital experiences that convert."
        ),
        color_tag="blue",
        projects=WEB_DESIGN_PROJECTS,
    ),
    Service(
        id="social-media",
        name="Social Media Content",
        title="Content that grows audiences",
        description=(
            "Engaging content that tells your brand story. We create, schedule, "
            "and manage social media campaigns that grow your audience."
        ),
        color_tag="purple",
        projects=SOCIAL_MEDIA_PROJECTS,
    ),
)

GALLERY_ITEMS: tuple[GalleryItem, ...] = tuple(
    sorted((item for service in SERVICES for item in service.projects), key=lambda i: i.id)
)

# Options offered by the contact form "service" select
SERVICE_OPTIONS: tuple[str, ...] = tuple(s.name for s in SERVICES) + ("Both",)


def find_item(item_id: int, items: Iterable[GalleryItem] = GALLERY_ITEMS) -> GalleryItem:
    """Look up a gallery item by id. Raises KeyError when unknown."""
    for item in items:
        if item.id == item_id:
            return item
    raise KeyError(f"Unknown gallery item: {item_id}")


def find_service(service_id: str, services: Iterable[Service] = SERVICES) -> Service:
    """Look up a service by id. Raises KeyError when unknown."""
    for service in services:
        if service.id == service_id:
            return service
    raise KeyError(f"Unknown service: {service_id}")


def service_for_item(item: GalleryItem, services: Iterable[Service] = SERVICES) -> Optional[Service]:
    """Service that owns the item, if any"""
    for service in services:
        if any(p.id == item.id for p in service.projects):
            return service
    return None


def validate_catalog(
    items: Iterable[GalleryItem] = GALLERY_ITEMS,
    services: Iterable[Service] = SERVICES,
) -> None:
    """Check catalog invariants at startup.

    Raises:
        ConfigurationError: duplicate item/service ids
    """
    seen: set[int] = set()
    for item in items:
        if item.id in seen:
            raise ConfigurationError(f"Duplicate gallery item id: {item.id}")
        seen.add(item.id)

    service_ids: set[str] = set()
    for service in services:
        if service.id in service_ids:
            raise ConfigurationError(f"Duplicate service id: {service.id}")
        service_ids.add(service.id)
