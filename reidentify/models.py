"""
Database models.

Every collection of the ID-card workflow is schema-less: a document is an
arbitrary field map stored in the ``data`` JSON column under a
store-assigned, ObjectId-shaped identifier. Table names match the
collection names the dashboard frontend has always used.
"""

from __future__ import annotations

import secrets
from datetime import datetime, timezone
from typing import Any, Dict

from .extensions import db


def new_document_id() -> str:
    """Return a fresh opaque identifier (24 lowercase hex characters)."""
    return secrets.token_hex(12)


class DocumentMixin:
    """Columns shared by all schema-less collections."""

    # Insertion order; listings sort on it.
    seq = db.Column(db.Integer, primary_key=True, autoincrement=True)
    id = db.Column(db.String(64), nullable=False, unique=True, default=new_document_id)
    data = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"_id": self.id}
        payload.update({k: v for k, v in (self.data or {}).items() if k != "_id"})
        return payload

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


class PendingRequest(DocumentMixin, db.Model):
    """ID-card request waiting for a decision.

    Created by the student upload form (outside this service) and removed
    once an administrator approves or rejects it.
    """

    __tablename__ = "idcards"


class ApprovedRequest(DocumentMixin, db.Model):
    """Approved request queued for printing."""

    __tablename__ = "printids"


class RejectedRequest(DocumentMixin, db.Model):
    """Rejected request."""

    __tablename__ = "rejectedidcards"


class ApprovedHistory(DocumentMixin, db.Model):
    """Archive of approved requests, filled by the print workflow."""

    __tablename__ = "acchistoryid"


class RejectedHistory(DocumentMixin, db.Model):
    """Archive of rejected requests."""

    __tablename__ = "rejhistoryids"


class FacultyNumber(db.Model):
    """Allowed faculty number (static reference data)."""

    __tablename__ = "facultynumbers"

    id = db.Column(db.String(64), primary_key=True, default=new_document_id)
    fac_number = db.Column("facNumber", db.String(128), nullable=False, unique=True)

    def to_dict(self) -> Dict[str, Any]:
        return {"_id": self.id, "facNumber": self.fac_number}

    def __repr__(self) -> str:
        return f"<FacultyNumber {self.fac_number}>"


# Collection name -> model. Names are what the service layer and the
# routes use to address a collection.
COLLECTIONS: Dict[str, type] = {
    "pending": PendingRequest,
    "approved": ApprovedRequest,
    "rejected": RejectedRequest,
    "approved_history": ApprovedHistory,
    "rejected_history": RejectedHistory,
}
