# studiofolio/models/__init__.py
"""
Data models for Studiofolio.
"""

from .types import (
    ServiceColor,
    GalleryItem,
    Service,
    Stat,
    ContactFormData,
    SubmissionResult,
    IntersectionEntry,
    Section,
)

__all__ = [
    'ServiceColor',
    'GalleryItem',
    'Service',
    'Stat',
    'ContactFormData',
    'SubmissionResult',
    'IntersectionEntry',
    'Section',
]
