"""
Voyage Worker.

arq background worker running translation jobs.
"""

__version__ = "0.1.0"
