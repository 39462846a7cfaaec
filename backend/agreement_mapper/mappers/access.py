"""
Safe navigation helpers for loosely-structured application records.

KYC payloads, uploaded documents and stakeholder lists are optional at
every level, so every lookup goes through these helpers instead of
indexing dicts directly.  A missing key, a ``None`` or a non-dict
intermediate all resolve to the default.
"""

from __future__ import annotations

from typing import Any

from agreement_mapper.core.constants import MAX_PERSON_ROWS


def get_nested(record: Any, path: str, default: Any = "") -> Any:
    """
    Read a dot-notation path (e.g. 'kyc.aadhaar.data.name') from nested dicts.

    Falsy leaf values (None, "", 0, empty containers) also return the
    default, so callers can chain fallbacks with ``first_of``.
    """
    current = record
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        current = current.get(key)
    return current if current else default


def first_of(*values: Any) -> Any:
    """Return the first truthy value, or empty string."""
    for value in values:
        if value:
            return value
    return ""


def get_list(record: Any, key: str) -> list[Any]:
    """Return record[key] as a list; anything that isn't a sequence becomes []."""
    value = record.get(key) if isinstance(record, dict) else None
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def find_document(documents: list[Any], *doc_types: str) -> dict[str, Any]:
    """First uploaded document whose ``type`` is one of doc_types, else {}."""
    for doc in documents:
        if isinstance(doc, dict) and doc.get("type") in doc_types:
            return doc
    return {}


def pick_signatory(people: list[Any]) -> dict[str, Any]:
    """
    Resolve the signing stakeholder.

    First entry flagged ``isSignatory``, else the first entry in list
    order, else an empty placeholder.
    """
    for person in people:
        if isinstance(person, dict) and person.get("isSignatory"):
            return person
    if people and isinstance(people[0], dict):
        return people[0]
    return {}


def name_at(people: list[Any], index: int) -> str:
    """Name of the entry at a list position, empty when the slot is absent."""
    if index < len(people):
        return get_nested(people[index], "name")
    return ""


def project_persons(people: list[Any], address_path: str = "address") -> list[dict[str, Any]]:
    """
    Project the first two stakeholders onto the template's repeating rows.

    Each row is {name, mobile, email, address}; ``address_path`` selects
    where the address lives on the source record.
    """
    return [
        {
            "name": get_nested(person, "name"),
            "mobile": get_nested(person, "mobile"),
            "email": get_nested(person, "email"),
            "address": get_nested(person, address_path),
        }
        for person in people[:MAX_PERSON_ROWS]
    ]
