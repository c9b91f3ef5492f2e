"""Flask error handlers — JSON bodies for every error status."""

import logging

from .helpers import api_error

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    """Register 404, 405, and 500 error handlers on the Flask app."""

    @app.errorhandler(404)
    def not_found(e):
        return api_error("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return api_error("Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(e):
        logger.error(f"Internal server error: {getattr(e, 'original_exception', e)}", exc_info=True)
        return api_error("Internal server error", 500)
