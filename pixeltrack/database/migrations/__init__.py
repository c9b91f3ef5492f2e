"""Versioned schema migrations."""

from .runner import MIGRATIONS, MigrationError, MigrationRunner

__all__ = ["MIGRATIONS", "MigrationError", "MigrationRunner"]
