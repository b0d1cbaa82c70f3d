from __future__ import annotations

from flask import jsonify

from ..helpers import api_errors, get_store
from ..services.faculty_service import is_valid_faculty_number
from . import bp


@bp.get('/check-faculty/<faculty_id>')
@api_errors("Error checking faculty ID")
def check_faculty(faculty_id: str):
    """``{"valid": true}`` if the faculty number is on the allow-list."""
    return jsonify({'valid': is_valid_faculty_number(get_store(), faculty_id)})
