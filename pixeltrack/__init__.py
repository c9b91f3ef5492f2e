"""
PixelTrack - Minimal pixel-based page view counter
"""

__version__ = "1.0.0"
__author__ = "PixelTrack Team"

from .database.manager import DatabaseManager
from .export.exporter import StatsExporter
from .tracking.counter import ViewCounter

__all__ = [
    "DatabaseManager",
    "StatsExporter",
    "ViewCounter"
]
