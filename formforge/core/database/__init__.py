"""
Centralized database layer for FormForge.

This package provides a unified location for all database entities and repositories.

Structure:
- entities/: Database entity models organized by table
- repositories/: Data access layer organized by table
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, create_all)

The global engine lives in ``formforge.core.database.session`` and is created
from settings on first import of that module.
"""

from .base import Base
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "create_all",
    "create_engine",
    "create_sessionmaker",
]
