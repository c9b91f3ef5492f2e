"""Flask blueprints for the tracking and stats endpoints."""

from .errors import register_error_handlers
from .stats import stats_bp
from .tracking import tracking_bp

__all__ = ["register_error_handlers", "stats_bp", "tracking_bp"]
