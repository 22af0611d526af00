"""
Voyage Database Package.

SQLAlchemy models and async session management shared by the API
and the worker.
"""

__version__ = "0.1.0"

from .models import Base

__all__ = ["Base"]
