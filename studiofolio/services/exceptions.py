# studiofolio/services/exceptions.py
"""
Shared exception types for the landing page controllers.

Kept free of imports so models and services can both depend on it.
"""

from typing import Optional


class SubmissionFailure(Exception):
    """Raised by a form transport when the endpoint did not accept the submission."""

    def __init__(self, reason: str, status: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status = status


class OutOfRangeIndex(IndexError):
    """Raised when carousel navigation targets an index outside the image list."""

    def __init__(self, index: int, length: int):
        super().__init__(f"Carousel index {index} out of range [0, {length})")
        self.index = index
        self.length = length


class ConfigurationError(ValueError):
    """Raised at startup when settings or static catalogs are unusable."""

    pass
