"""Service layer for ID-card request decisions.

A decision moves a pending request into the approved (print queue) or
rejected collection. Routes in :mod:`reidentify.requests.routes` are thin
HTTP wrappers around :func:`update_request_status`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from ..store import DocumentStore

logger = logging.getLogger(__name__)

STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"

# status -> destination collection
DESTINATIONS = {
    STATUS_APPROVED: "approved",
    STATUS_REJECTED: "rejected",
}

POLICY_REJECT = "reject"
POLICY_DISCARD = "discard"
UNKNOWN_STATUS_POLICIES = (POLICY_REJECT, POLICY_DISCARD)


class RequestNotFoundError(LookupError):
    """No pending request with the given identifier."""


class InvalidStatusError(ValueError):
    """Status is neither "approved" nor "rejected"."""


def update_request_status(
    store: DocumentStore,
    request_id: str,
    status: Any,
    unknown_status_policy: str = POLICY_REJECT,
) -> Dict[str, str]:
    """Apply a decision to a pending request.

    The copy into the destination collection and the removal from the
    pending collection are committed together; if either fails nothing
    changes.

    For a status other than "approved"/"rejected" the behaviour depends on
    ``unknown_status_policy``: ``"reject"`` raises :class:`InvalidStatusError`
    without touching the store, ``"discard"`` drops the pending request
    without copying it.

    Raises :class:`RequestNotFoundError` if the request does not exist or
    was decided concurrently; any copy made here is then rolled back.
    """
    destination = DESTINATIONS.get(status) if isinstance(status, str) else None

    with store.transaction():
        document = store.get("pending", request_id)
        if document is None:
            raise RequestNotFoundError(request_id)

        if destination is not None:
            store.insert(destination, document)
        elif unknown_status_policy == POLICY_DISCARD:
            logger.warning(
                "Discarding pending request %s: unrecognised status %r", request_id, status
            )
        else:
            raise InvalidStatusError(status)

        # Another decision may have removed it since the lookup.
        if not store.delete("pending", request_id):
            raise RequestNotFoundError(request_id)

    logger.info("Request %s moved out of pending (status=%r)", request_id, status)
    return {"message": f"Request {status} successfully"}


def add_pending_requests(store: DocumentStore, documents: Iterable[Mapping[str, Any]]) -> List[str]:
    """Insert pending requests and return their identifiers.

    The upload form normally does this; the helper backs the
    ``seed-pending`` CLI command.
    """
    ids: List[str] = []
    with store.transaction():
        for document in documents:
            ids.append(store.insert("pending", document))
    return ids
