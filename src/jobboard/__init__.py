"""
Job board backend: a GraphQL API over companies and their job postings
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
