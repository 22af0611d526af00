"""
Voyage API.

FastAPI application serving translation coverage and trigger endpoints
to the CMS.
"""

__version__ = "0.1.0"
