# tests/test_catalog.py
"""Tests for studiofolio.models (catalog and core types)"""

import pytest

from studiofolio.models.catalog import (
    GALLERY_ITEMS,
    SECTION_IDS,
    SERVICE_OPTIONS,
    SERVICES,
    STATS,
    find_item,
    find_service,
    service_for_item,
    validate_catalog,
)
from studiofolio.models.types import (
    ContactFormData,
    GalleryItem,
    IntersectionEntry,
    Service,
    ServiceColor,
)
from studiofolio.services.exceptions import ConfigurationError


class TestCatalog:

    def test_shipped_catalog_is_valid(self):
        validate_catalog()

    def test_item_ids_unique_and_sorted(self):
        ids = [item.id for item in GALLERY_ITEMS]
        assert ids == sorted(set(ids))

    def test_every_item_belongs_to_a_service(self):
        for item in GALLERY_ITEMS:
            assert service_for_item(item) is not None

    def test_service_projects_are_catalog_entries(self):
        for service in SERVICES:
            for project in service.projects:
                assert find_item(project.id) is project

    def test_sections(self):
        assert {"services", "work", "contact"} <= SECTION_IDS

    def test_service_options_include_both(self):
        assert SERVICE_OPTIONS[-1] == "Both"
        assert "Web Design" in SERVICE_OPTIONS

    def test_stats_end_values(self):
        assert [s.end for s in STATS] == [120, 45, 8, 100]

    def test_find_unknown(self):
        with pytest.raises(KeyError):
            find_item(0)
        with pytest.raises(KeyError):
            find_service("video")

    def test_duplicate_item_id_rejected(self):
        a = GalleryItem(id=1, title="A", category="Web Design", description="")
        b = GalleryItem(id=1, title="B", category="Web Design", description="")
        with pytest.raises(ConfigurationError):
            validate_catalog(items=(a, b), services=())

    def test_duplicate_service_id_rejected(self):
        s = Service(id="x", name="X", title="X", description="")
        with pytest.raises(ConfigurationError):
            validate_catalog(items=(), services=(s, s))


class TestTypes:

    def test_service_color_parse(self):
        assert ServiceColor.parse("Blue") is ServiceColor.BLUE
        assert ServiceColor.parse("teal") is None
        assert ServiceColor.parse("") is None

    def test_unknown_color_tag_has_no_color(self):
        service = Service(id="x", name="X", title="X", description="", color_tag="teal")
        assert service.color is None

    def test_thumbnail_prefers_cover(self):
        item = GalleryItem(id=9, title="T", category="C", description="", cover_image="cover.jpg", images=("a.jpg",))
        assert item.thumbnail == "cover.jpg"

    def test_thumbnail_falls_back_to_first_image(self):
        item = GalleryItem(id=9, title="T", category="C", description="", images=("a.jpg", "b.jpg"))
        assert item.thumbnail == "a.jpg"
        assert item.has_gallery

    def test_item_without_images(self):
        item = GalleryItem(id=9, title="T", category="C", description="")
        assert item.thumbnail is None
        assert item.has_gallery is False

    def test_form_missing_ignores_whitespace(self):
        form = ContactFormData(name="Ada", email=" ", message="Hi")
        assert form.missing(("name", "email", "message")) == ["email"]

    def test_form_clear(self):
        form = ContactFormData(name="Ada", email="a@b.c", phone="1", service="Both", message="Hi")
        form.clear()
        assert form.is_empty()

    def test_intersection_entry_from_event(self):
        entry = IntersectionEntry.from_event({"id": "work", "ratio": 0.25, "intersecting": True})
        assert entry == IntersectionEntry("work", 0.25, True)

    def test_intersection_entry_defaults(self):
        entry = IntersectionEntry.from_event({"id": "work", "ratio": None})
        assert entry.ratio == 0.0
        assert entry.is_intersecting is False
