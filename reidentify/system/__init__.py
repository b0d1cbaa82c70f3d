"""System endpoints (health probe)."""

from flask import Blueprint

bp = Blueprint("system", __name__)

from . import routes  # noqa: F401
