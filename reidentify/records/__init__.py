"""Listing endpoints for the request collections and their history."""

from flask import Blueprint

bp = Blueprint('records', __name__)

from . import routes  # noqa: F401
