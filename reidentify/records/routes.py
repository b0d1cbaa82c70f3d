"""Listing routes: one GET per collection, whole collection as a JSON array."""

from __future__ import annotations

from flask import jsonify

from ..helpers import api_errors, get_store
from ..services.records_service import list_documents
from . import bp


@bp.get('/pending')
@api_errors("Error fetching pending requests")
def list_pending():
    return jsonify(list_documents(get_store(), 'pending'))


@bp.get('/approved')
@api_errors("Error fetching approved requests")
def list_approved():
    return jsonify(list_documents(get_store(), 'approved'))


@bp.get('/rejected')
@api_errors("Error fetching rejected requests")
def list_rejected():
    return jsonify(list_documents(get_store(), 'rejected'))


@bp.get('/acchistoryid')
@api_errors("Error fetching approved history data")
def list_approved_history():
    """Approved-request archive (written by the print workflow)."""
    return jsonify(list_documents(get_store(), 'approved_history'))


@bp.get('/rejhistoryids')
@api_errors("Error fetching rejected history data")
def list_rejected_history():
    """Rejected-request archive."""
    return jsonify(list_documents(get_store(), 'rejected_history'))
