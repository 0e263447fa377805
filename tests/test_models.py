from datetime import date, datetime

import pytest

from carnetdb.models import Contact, Interaction, Todo, to_display_date, to_iso_date


def test_to_iso_date_converts_display_format():
    assert to_iso_date("15/03/2024") == "2024-03-15"


@pytest.mark.parametrize("text", ["", "2024-03-15", "31/02/2024", "1/3/2024", "aa/bb/cccc"])
def test_to_iso_date_invalid_gives_empty(text):
    assert to_iso_date(text) == ""


def test_to_display_date_from_iso_text():
    assert to_display_date("2024-03-15") == "15/03/2024"


def test_to_display_date_from_date_objects():
    assert to_display_date(date(2023, 12, 1)) == "01/12/2023"
    assert to_display_date(datetime(2023, 12, 1, 10, 30)) == "01/12/2023"


@pytest.mark.parametrize("value", [None, "", "15/03/2024", 42, "2024-13-01"])
def test_to_display_date_invalid_gives_empty(value):
    assert to_display_date(value) == ""


@pytest.mark.parametrize("text", ["01/01/2000", "29/02/2024", "31/12/1999"])
def test_date_round_trip(text):
    assert to_display_date(to_iso_date(text)) == text


def test_contact_equality_ignores_interactions():
    first = Contact(last_name="Martin", first_name="Paul")
    second = Contact(last_name="Martin", first_name="Paul")
    second.interactions.append(Interaction(content="call"))
    assert first == second
    assert first.interactions == []


def test_todo_and_interaction_hold_given_values():
    todo = Todo(task="send quote", due_date="01/04/2024", contact_id=3)
    interaction = Interaction(content="meeting", date="02/04/2024", id=5, contact_id=3)
    assert (todo.task, todo.due_date, todo.contact_id) == ("send quote", "01/04/2024", 3)
    assert (interaction.id, interaction.contact_id) == (5, 3)