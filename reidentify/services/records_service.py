"""Read-only access to the request collections and their history."""

from __future__ import annotations

from typing import Any, Dict, List

from ..store import DocumentStore


def list_documents(store: DocumentStore, collection: str) -> List[Dict[str, Any]]:
    """Return every document of ``collection``. No filtering or paging."""
    return store.find_all(collection)
