"""
Request decisions (approve / reject) for the faculty dashboard.

The blueprint exposes a single PATCH endpoint; the transition itself lives
in :mod:`reidentify.services.requests_service`.
"""

from flask import Blueprint

bp = Blueprint('requests', __name__)

from . import routes  # noqa: F401
