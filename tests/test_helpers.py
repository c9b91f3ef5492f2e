"""Tests for route helpers (pixeltrack/routes/helpers.py)."""

import json

from pixeltrack.routes.helpers import api_error


def test_api_error_shape(app):
    """Verify response JSON shape has error and status keys."""
    with app.test_request_context():
        response, status_code = api_error("Something went wrong")
        data = json.loads(response.get_data(as_text=True))

        assert data == {"error": "Something went wrong", "status": 400}
        assert status_code == 400


def test_api_error_custom_status(app):
    with app.test_request_context():
        response, status_code = api_error("Not found", 404)
        data = json.loads(response.get_data(as_text=True))

        assert data == {"error": "Not found", "status": 404}
        assert status_code == 404
