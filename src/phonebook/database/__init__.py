"""
Database module for Phonebook
"""

from .connection import create_tables, get_async_session, init_database, reset_database

__all__ = ["create_tables", "get_async_session", "init_database", "reset_database"]
