"""Faculty-number allow-list."""

from __future__ import annotations

import json
from typing import Any, Iterable, List

from ..store import DocumentStore


def is_valid_faculty_number(store: DocumentStore, faculty_number: Any) -> bool:
    """True only if ``faculty_number`` is on the allow-list verbatim.

    No trimming or case folding: "f001" and " F001" do not match "F001".
    """
    if not isinstance(faculty_number, str) or not faculty_number:
        return False
    return store.has_faculty_number(faculty_number)


def import_faculty_numbers(store: DocumentStore, values: Iterable[str]) -> int:
    """Add faculty numbers to the allow-list, skipping duplicates.

    Returns how many new entries were added.
    """
    added = 0
    with store.transaction():
        for value in values:
            if value and store.add_faculty_number(value):
                added += 1
    return added


def parse_faculty_file(text: str) -> List[str]:
    """Parse an allow-list file.

    Accepts either a JSON array (of strings or ``{"facNumber": ...}``
    objects) or plain text with one faculty number per line. Blank lines
    and lines starting with ``#`` are ignored.
    """
    stripped = text.strip()
    if stripped.startswith("["):
        out: List[str] = []
        for item in json.loads(stripped):
            if isinstance(item, dict):
                item = item.get("facNumber")
            if isinstance(item, str) and item:
                out.append(item)
        return out

    values = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        values.append(line)
    return values
