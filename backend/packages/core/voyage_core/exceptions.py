"""
Domain exceptions.

Services raise these; routers map them to HTTP status codes. Both derive
from ``ValueError`` so callers that only expect ``ValueError`` keep working.
"""


class ContentNotFoundError(ValueError):
    """The requested content item does not exist."""


class UnknownContentTypeError(ValueError):
    """The content type names no translatable content family."""
