"""
Database module for the jydb backend
"""

from .connection import (
    dispose_database,
    get_async_engine,
    get_async_session,
    init_database,
)

__all__ = ["dispose_database", "get_async_engine", "get_async_session", "init_database"]
