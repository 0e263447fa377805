"""SQLite storage of contacts."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Sequence
from os import PathLike
from typing import Any

from carnetdb.models import Contact, to_display_date, to_iso_date

_SCHEMA = """
CREATE TABLE IF NOT EXISTS contact (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nom TEXT,
    prenom TEXT,
    entreprise TEXT,
    mail TEXT,
    telephone TEXT,
    urlPhoto TEXT,
    dateCreation TEXT,
    dateEdition TEXT
);
CREATE TABLE IF NOT EXISTS Interaction (
    idContact INTEGER REFERENCES contact(id),
    idInteraction INTEGER PRIMARY KEY AUTOINCREMENT,
    contenu TEXT,
    DateCreation TEXT
);
CREATE TABLE IF NOT EXISTS Todo (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    contenu TEXT,
    DatePrevue TEXT
);
CREATE TABLE IF NOT EXISTS TodoInteractionAssociation (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    idTodo INTEGER REFERENCES Todo(id),
    idInteraction INTEGER REFERENCES Interaction(idInteraction)
);
"""

_CONTACT_COLUMNS = (
    "id, nom, prenom, entreprise, mail, telephone, urlPhoto, dateCreation, dateEdition"
)


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a query fails."""


def _contact_from_row(row: Sequence[Any]) -> Contact:
    return Contact(
        id=int(row[0] or 0),
        last_name=_text(row[1]),
        first_name=_text(row[2]),
        company=_text(row[3]),
        email=_text(row[4]),
        phone=_text(row[5]),
        photo_url=_text(row[6]),
        created=to_display_date(row[7]),
        edited=_text(row[8]),
    )


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _date_param(display: str) -> str | None:
    return to_iso_date(display) or None


class ContactDatabase:
    """Contact book stored in an SQLite file."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self._connection: sqlite3.Connection | None = None
        try:
            connection = sqlite3.connect(path)
            connection.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {path!s}: {exc}") from exc
        self._connection = connection

    @property
    def connection(self) -> sqlite3.Connection:
        """The open SQLite connection."""
        if self._connection is None:
            raise DatabaseError("database is closed")
        return self._connection

    def close(self) -> None:
        """Close the database; further queries raise :class:`DatabaseError`."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> ContactDatabase:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _execute(self, sql: str, params: Sequence[Any] | dict[str, Any] = ()) -> sqlite3.Cursor:
        connection = self.connection
        try:
            with connection:
                return connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(f"query failed: {exc}") from exc

    def _fetch_all(self, sql: str, params: Sequence[Any] | dict[str, Any] = ()) -> list[tuple]:
        connection = self.connection
        try:
            return connection.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(f"query failed: {exc}") from exc

    def _contacts(self, sql: str, params: Sequence[Any] = ()) -> list[Contact]:
        rows: Iterable[tuple] = self._fetch_all(sql, params)
        return [_contact_from_row(row) for row in rows]

    def insert_contact(self, contact: Contact) -> int:
        """Store a new contact and return its id."""
        cursor = self._execute(
            "INSERT INTO contact (nom, prenom, entreprise, mail, telephone, urlPhoto,"
            " dateCreation, dateEdition) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            (
                contact.last_name,
                contact.first_name,
                contact.company,
                contact.email,
                contact.phone,
                contact.photo_url,
                _date_param(contact.created),
                # The edition column starts out holding the creation date.
                contact.created,
            ),
        )
        return int(cursor.lastrowid or 0)

    def contacts(self) -> list[Contact]:
        """All contacts in storage order."""
        return self._contacts(f"SELECT {_CONTACT_COLUMNS} FROM contact")

    def contacts_by_name(self, last_name: str) -> list[Contact]:
        """Contacts whose last name equals ``last_name``."""
        return self._contacts(
            f"SELECT {_CONTACT_COLUMNS} FROM contact WHERE nom = ?", (last_name,)
        )

    def contacts_by_company(self, company: str) -> list[Contact]:
        """Contacts working for ``company``."""
        return self._contacts(
            f"SELECT {_CONTACT_COLUMNS} FROM contact WHERE entreprise = ?", (company,)
        )

    def update_contact(self, original: Contact, updated: Contact) -> bool:
        """Overwrite the contacts matching ``original``'s names with ``updated``.

        The creation date is kept from ``original``.
        """
        self._execute(
            "UPDATE contact SET nom = ?, prenom = ?, entreprise = ?, mail = ?,"
            " telephone = ?, urlPhoto = ?, dateCreation = ?, dateEdition = ?"
            " WHERE nom = ? AND prenom = ?",
            (
                updated.last_name,
                updated.first_name,
                updated.company,
                updated.email,
                updated.phone,
                updated.photo_url,
                _date_param(original.created),
                updated.edited,
                original.last_name,
                original.first_name,
            ),
        )
        return True

    def delete_contact(self, contact: Contact) -> int:
        """Delete the contacts with the same names; return how many went."""
        cursor = self._execute(
            "DELETE FROM contact WHERE nom = ? AND prenom = ?",
            (contact.last_name, contact.first_name),
        )
        return cursor.rowcount

    def contacts_sorted_by_first_name(self) -> list[Contact]:
        """All contacts ordered by first name, ascending."""
        return self._contacts(f"SELECT {_CONTACT_COLUMNS} FROM contact ORDER BY prenom ASC")

    def contacts_sorted_by_creation(self) -> list[Contact]:
        """All contacts ordered by creation date key, most recent first."""
        return self._contacts(
            f"SELECT {_CONTACT_COLUMNS} FROM contact ORDER BY "
            "substr(dateCreation, 7, 4) || '-' || substr(dateCreation, 4, 2)"
            " || '-' || substr(dateCreation, 1, 2) DESC"
        )

    def contacts_created_between(self, start: str, end: str) -> list[Contact]:
        """Contacts created between two ``dd/MM/yyyy`` dates, inclusive."""
        return self._contacts(
            f"SELECT {_CONTACT_COLUMNS} FROM contact WHERE dateCreation BETWEEN ? AND ?",
            (to_iso_date(start), to_iso_date(end)),
        )