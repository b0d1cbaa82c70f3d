"""Faculty-number check used by the dashboard login form."""

from flask import Blueprint

bp = Blueprint('faculty', __name__)

from . import routes  # noqa: F401
