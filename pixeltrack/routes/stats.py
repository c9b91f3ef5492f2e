"""Stats blueprint — JSON export of daily view counts."""

from flask import Blueprint, Response, current_app, request

from pixeltrack.export.exporter import StatsExporter, render_json
from pixeltrack.routes.validators import StatsParams

stats_bp = Blueprint("stats", __name__)


@stats_bp.route("/stats.json")
def stats_json() -> Response:
    """Summary plus per-day rows, optionally for a single domain."""
    params = StatsParams.model_validate(request.args.to_dict())
    # Query errors propagate to the 500 handler, never a partial body
    result = StatsExporter(current_app.db_manager).export(params.domain)
    return Response(render_json(result), mimetype="application/json")
