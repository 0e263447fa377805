"""Interactions and to-do items attached to contacts."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import replace
from os import PathLike
from pathlib import Path
from typing import Any

from carnetdb.database import ContactDatabase
from carnetdb.models import Interaction, Todo, to_display_date, to_iso_date

_EXPORTS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    (
        "contact.json",
        "SELECT * FROM contact",
        (
            "ID",
            "nom",
            "prenom",
            "entreprise",
            "mail",
            "telephone",
            "urlPhoto",
            "dateCreation",
            "dateEdition",
        ),
    ),
    (
        "interaction.json",
        "SELECT * FROM Interaction",
        ("ID Contact", "Id Interaction", "Contenu", "Date Creation"),
    ),
    (
        "todo.json",
        "SELECT * FROM Todo",
        ("ID Todo", "Contenu", "Date Prevue"),
    ),
    (
        "todoinetarctionassociations.json",
        "SELECT * FROM TodoInteractionAssociation",
        ("ID TodoInteractionAssociation", "Id Todo", "Id Interaction"),
    ),
)

_TODO_JOIN = (
    "SELECT td.contenu, td.DatePrevue, i.idContact FROM Todo td"
    " JOIN TodoInteractionAssociation ti ON td.id = ti.idTodo"
    " JOIN Interaction i ON i.idInteraction = ti.idInteraction"
    " WHERE td.DatePrevue BETWEEN ? AND ?"
)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _interaction_from_row(row: Sequence[Any]) -> Interaction:
    return Interaction(
        contact_id=_int(row[0]),
        id=_int(row[1]),
        content=_text(row[2]),
        date=to_display_date(row[3]),
    )


def _linked_todo_from_row(row: Sequence[Any]) -> Todo:
    return Todo(task=_text(row[0]), due_date=to_display_date(row[1]), contact_id=_int(row[2]))


class ActivityDatabase(ContactDatabase):
    """Contact database that also stores interactions and their to-do items."""

    def interactions_for(self, contact_id: int) -> list[Interaction]:
        """Interactions recorded for an existing contact."""
        rows = self._fetch_all(
            "SELECT Interaction.* FROM Interaction"
            " JOIN contact ON Interaction.idContact = contact.id"
            " WHERE contact.id = ?",
            (contact_id,),
        )
        return [_interaction_from_row(row) for row in rows]

    def insert_interaction(self, contact_id: int, interaction: Interaction) -> Interaction:
        """Store an interaction for a contact; return it with its new id."""
        cursor = self._execute(
            "INSERT INTO Interaction (idContact, contenu, DateCreation) VALUES (?, ?, ?)",
            (contact_id, interaction.content, to_iso_date(interaction.date) or None),
        )
        return replace(interaction, id=int(cursor.lastrowid or 0), contact_id=contact_id)

    def interactions_between(self, start: str, end: str) -> list[Interaction]:
        """Interactions dated between two ``dd/MM/yyyy`` dates, inclusive."""
        rows = self._fetch_all(
            "SELECT * FROM Interaction WHERE DateCreation BETWEEN ? AND ?",
            (to_iso_date(start), to_iso_date(end)),
        )
        return [_interaction_from_row(row) for row in rows]

    def todos_for(self, interaction_id: int) -> list[Todo]:
        """To-do items attached to an interaction."""
        rows = self._fetch_all(
            "SELECT Todo.* FROM Todo"
            " JOIN TodoInteractionAssociation ON Todo.id = TodoInteractionAssociation.idTodo"
            " WHERE TodoInteractionAssociation.idInteraction = ?",
            (interaction_id,),
        )
        return [Todo(task=_text(row[1]), due_date=to_display_date(row[2])) for row in rows]

    def insert_todo(self, todo: Todo, interaction_id: int) -> int:
        """Store a to-do item, link it to an interaction and return its id."""
        cursor = self._execute(
            "INSERT INTO Todo (contenu, DatePrevue) VALUES (?, ?)",
            (todo.task, to_iso_date(todo.due_date) or None),
        )
        todo_id = int(cursor.lastrowid or 0)
        self._execute(
            "INSERT INTO TodoInteractionAssociation (idTodo, idInteraction) VALUES (?, ?)",
            (todo_id, interaction_id),
        )
        return todo_id

    def todos_between(self, start: str, end: str) -> list[Todo]:
        """To-do items due between two ``dd/MM/yyyy`` dates, with their contact."""
        rows = self._fetch_all(_TODO_JOIN, (to_iso_date(start), to_iso_date(end)))
        return [_linked_todo_from_row(row) for row in rows]

    def todos_between_for_contact(self, start: str, end: str, contact_id: int) -> list[Todo]:
        """To-do items of one contact due between two ``dd/MM/yyyy`` dates."""
        rows = self._fetch_all(
            _TODO_JOIN + " AND i.idContact = ?",
            (to_iso_date(start), to_iso_date(end), contact_id),
        )
        return [_linked_todo_from_row(row) for row in rows]

    def export_json(self, directory: str | PathLike[str]) -> list[Path]:
        """Write every table as a JSON array of objects; return the files written."""
        target = Path(directory)
        written = []
        for filename, sql, keys in _EXPORTS:
            records = [
                {key: _text(value) for key, value in zip(keys, row)}
                for row in self._fetch_all(sql)
            ]
            path = target / filename
            path.write_text(json.dumps(records, indent=4, ensure_ascii=False) + "\n", encoding="utf-8")
            written.append(path)
        return written