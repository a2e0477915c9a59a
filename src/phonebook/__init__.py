"""
Phonebook GraphQL API
Address book service with pluggable person stores
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
