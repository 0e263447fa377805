"""Records kept in the contact book and the date formats they use."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime

_DISPLAY_PATTERN = re.compile(r"(\d{2})/(\d{2})/(\d{4})")


def to_iso_date(text: str) -> str:
    """Convert a ``dd/MM/yyyy`` date to ``yyyy-MM-dd``; invalid input gives ``""``."""
    match = _DISPLAY_PATTERN.fullmatch(text.strip()) if text else None
    if match is None:
        return ""
    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return ""


def to_display_date(value: object) -> str:
    """Convert a stored date (ISO text or date object) to ``dd/MM/yyyy``.

    Values that are not a valid date give ``""``.
    """
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.strftime("%d/%m/%Y")
    if not isinstance(value, str):
        return ""
    try:
        parsed = date.fromisoformat(value.strip())
    except ValueError:
        return ""
    return parsed.strftime("%d/%m/%Y")


@dataclass
class Contact:
    """A person in the contact book."""

    last_name: str = ""
    first_name: str = ""
    company: str = ""
    email: str = ""
    phone: str = ""
    photo_url: str = ""
    created: str = ""
    edited: str = ""
    id: int = 0
    interactions: list[Interaction] = field(default_factory=list, compare=False)


@dataclass
class Interaction:
    """A note of an exchange with a contact."""

    content: str = ""
    date: str = ""
    id: int = 0
    contact_id: int = 0


@dataclass
class Todo:
    """A task planned after an interaction."""

    task: str = ""
    due_date: str = ""
    contact_id: int = 0