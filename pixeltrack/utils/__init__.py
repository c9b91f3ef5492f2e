"""Utility modules for PixelTrack"""

from .logger import setup_logging

__all__ = [
    'setup_logging'
]
