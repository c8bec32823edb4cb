"""
Async PostgreSQL access: declarative Base, engine and request-scoped sessions.
"""

from .base import Base
from .connection import engine, AsyncSessionLocal, get_db

__all__ = ["Base", "engine", "AsyncSessionLocal", "get_db"]
