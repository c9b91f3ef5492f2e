"""Persistence layer: connection ownership, schema migrations, repositories."""

from .manager import DatabaseManager
from .migrations import MigrationError

__all__ = ["DatabaseManager", "MigrationError"]
