"""Tracking blueprint — the counter pixel."""

from flask import Blueprint, Response, current_app, request

from pixeltrack.routes.validators import ViewParams
from pixeltrack.tracking.counter import ViewCounter

tracking_bp = Blueprint("tracking", __name__)

# 1x1 transparent GIF89a
PIXEL_GIF = (
    b"GIF89a\x01\x00\x01\x00\x80\x00\x00"
    b"\x00\x00\x00\xff\xff\xff!\xf9\x04\x01\x00\x00"
    b"\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00"
    b"\x00\x02\x02D\x01\x00;"
)


@tracking_bp.route("/counter.gif")
def counter_gif() -> Response:
    """Record one view and always answer with the pixel."""
    params = ViewParams.model_validate(request.args.to_dict())
    # Outcome is logged by the counter; the response never depends on it
    ViewCounter(current_app.db_manager).record_view(params.domain, params.page)

    resp = Response(PIXEL_GIF, mimetype="image/gif")
    resp.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
    return resp
