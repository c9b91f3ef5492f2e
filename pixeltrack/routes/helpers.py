"""Shared route helpers — standardized response builders."""

from flask import jsonify


def api_error(message, status_code=400):
    """Standardized error response: {"error": "...", "status": N}"""
    return jsonify({"error": message, "status": status_code}), status_code
