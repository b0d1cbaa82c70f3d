"""Document store facade.

Routes and services never touch models directly: they go through a
:class:`DocumentStore` instance created once by :func:`reidentify.create_app`
and kept in ``app.extensions["document_store"]``. Tests can hand
``create_app`` their own store (for example one that fails on purpose).

Writes (``insert``/``delete``) are only flushed; they become durable when
the surrounding :meth:`DocumentStore.transaction` block commits.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional

from sqlalchemy import delete

from .extensions import db
from .models import COLLECTIONS, FacultyNumber, new_document_id


class UnknownCollectionError(KeyError):
    """Raised when a collection name is not registered in the store."""


class DocumentStore:
    """Collection-level access to the schema-less documents."""

    def __init__(self, session=None, collections: Optional[Mapping[str, type]] = None) -> None:
        self._session = session
        self._collections = dict(collections or COLLECTIONS)

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    @property
    def collections(self) -> List[str]:
        return list(self._collections)

    def _model(self, collection: str) -> type:
        try:
            return self._collections[collection]
        except KeyError:
            raise UnknownCollectionError(collection) from None

    # --- documents -------------------------------------------------------

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Return the document with ``doc_id`` or None."""
        model = self._model(collection)
        obj = self.session.query(model).filter(model.id == doc_id).first()
        return obj.to_dict() if obj is not None else None

    def find_all(self, collection: str) -> List[Dict[str, Any]]:
        """Return every document of a collection in insertion order."""
        model = self._model(collection)
        rows = self.session.query(model).order_by(model.seq).all()
        return [row.to_dict() for row in rows]

    def count(self, collection: str) -> int:
        return self.session.query(self._model(collection)).count()

    def insert(self, collection: str, document: Mapping[str, Any]) -> str:
        """Stage a copy of ``document`` and return its identifier.

        A ``_id`` field, when present, becomes the identifier; otherwise a
        new one is generated.
        """
        fields = dict(document)
        doc_id = fields.pop("_id", None) or new_document_id()
        obj = self._model(collection)(id=str(doc_id), data=fields)
        self.session.add(obj)
        self.session.flush()
        return obj.id

    def delete(self, collection: str, doc_id: str) -> bool:
        """Stage deletion of a document.

        Issued as a DELETE against the table, so the answer reflects what
        the database removed: False if the row was already gone, even when
        this session had loaded it earlier.
        """
        model = self._model(collection)
        result = self.session.execute(delete(model).where(model.id == doc_id))
        return result.rowcount > 0

    # --- faculty allow-list ----------------------------------------------

    def has_faculty_number(self, value: str) -> bool:
        """Exact, case-sensitive match against the allow-list."""
        row = (
            self.session.query(FacultyNumber.id)
            .filter(FacultyNumber.fac_number == value)
            .first()
        )
        return row is not None

    def add_faculty_number(self, value: str) -> bool:
        """Stage a new allow-list entry. Returns False for duplicates."""
        if self.has_faculty_number(value):
            return False
        self.session.add(FacultyNumber(fac_number=value))
        self.session.flush()
        return True

    # --- transactions ----------------------------------------------------

    @contextmanager
    def transaction(self) -> Iterator["DocumentStore"]:
        """Commit staged writes on success, roll everything back on error."""
        try:
            yield self
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def rollback(self) -> None:
        self.session.rollback()
