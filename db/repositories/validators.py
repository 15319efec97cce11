"""
Identifier and input validation helpers for repository calls.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable


def parse_uuid(value: object, *, field: str = "id") -> uuid.UUID:
    """
    Coerce an identifier to UUID, raising ValueError naming the field.
    """

    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid {field}: {value!r}") from exc


def parse_uuid_list(values: Iterable[object], *, field: str = "id") -> list[uuid.UUID]:
    return [parse_uuid(value, field=field) for value in values]


def require_text(value: str | None, *, field: str) -> str:
    """
    Return the stripped value, raising ValueError when it is blank.
    """

    stripped = (value or "").strip()
    if not stripped:
        raise ValueError(f"{field} is required.")
    return stripped
