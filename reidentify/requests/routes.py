"""Routes for approving and rejecting ID-card requests.

All the logic is in :mod:`reidentify.services.requests_service`; here we
only read the request body and map service errors to HTTP answers.
"""

from __future__ import annotations

from flask import current_app, request

from ..helpers import api_errors, get_store, json_message
from ..services.requests_service import (
    InvalidStatusError,
    RequestNotFoundError,
    update_request_status,
)
from . import bp


@bp.patch('/<request_id>/status')
@api_errors("Error updating request")
def update_status(request_id: str):
    """Approve or reject a pending request.

    Body: ``{"status": "approved" | "rejected"}``.
    """
    payload = request.get_json(silent=True) or {}
    status = payload.get('status') if isinstance(payload, dict) else None

    try:
        result = update_request_status(
            get_store(),
            request_id,
            status,
            unknown_status_policy=current_app.config['UNKNOWN_STATUS_POLICY'],
        )
    except RequestNotFoundError:
        return json_message("Request not found", 404)
    except InvalidStatusError:
        return json_message(f"Invalid status: {status}", 400)
    return json_message(result['message'])
