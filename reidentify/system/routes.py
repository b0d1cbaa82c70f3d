from __future__ import annotations

from datetime import datetime, timezone

from flask import jsonify

from . import bp

SERVICE_MESSAGE = "ReIDentify Backend API is running"


@bp.get("/health")
def health():
    """Liveness probe. Does not touch the store."""
    return jsonify(
        status="OK",
        message=SERVICE_MESSAGE,
        timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )
