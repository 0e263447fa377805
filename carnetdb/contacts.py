"""In-memory list of contacts kept in step with the database."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace

from carnetdb.activity import ActivityDatabase
from carnetdb.models import Contact, Interaction


class ContactManager:
    """The contacts currently shown, backed by an :class:`ActivityDatabase`."""

    def __init__(self, database: ActivityDatabase) -> None:
        self._database = database
        self._contacts: list[Contact] = []
        self.reload()

    def reload(self) -> list[Contact]:
        """Load every contact from the database."""
        self._contacts = self._database.contacts()
        return list(self._contacts)

    def add(self, contact: Contact) -> Contact:
        """Store a new contact and keep it in the list; return it with its id."""
        contact_id = self._database.insert_contact(contact)
        stored = replace(contact, id=contact_id)
        self._contacts.append(stored)
        return stored

    def remove(self, contact: Contact) -> None:
        """Drop the contact with the same id from the list and its names from storage."""
        for index, current in enumerate(self._contacts):
            if current.id == contact.id:
                del self._contacts[index]
                break
        self._database.delete_contact(contact)

    def modify(self, original: Contact, updated: Contact) -> None:
        """Replace ``original`` by ``updated`` in the list and in storage."""
        self._contacts = [
            updated if current.id == original.id else current for current in self._contacts
        ]
        self._database.update_contact(original, updated)

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._contacts))

    def last_id(self) -> int:
        """Id of the last contact in the list, or 0 when it is empty."""
        return self._contacts[-1].id if self._contacts else 0

    def get(self, contact_id: int) -> Contact | None:
        """The listed contact with this id, if any."""
        return next((c for c in self._contacts if c.id == contact_id), None)

    def add_interaction(self, contact_id: int, interaction: Interaction) -> Interaction:
        """Store an interaction and attach it to the listed contact."""
        contact = self.get(contact_id)
        if contact is None:
            raise KeyError(contact_id)
        stored = self._database.insert_interaction(contact_id, interaction)
        contact.interactions.append(stored)
        return stored

    def find_by_name(self, last_name: str) -> list[Contact]:
        """List only the contacts with this last name."""
        self._contacts = self._database.contacts_by_name(last_name)
        return list(self._contacts)

    def find_by_company(self, company: str) -> list[Contact]:
        """List only the contacts working for this company."""
        self._contacts = self._database.contacts_by_company(company)
        return list(self._contacts)

    def sort_alphabetically(self) -> list[Contact]:
        """List every contact ordered by first name."""
        self._contacts = self._database.contacts_sorted_by_first_name()
        return list(self._contacts)

    def sort_by_creation(self) -> list[Contact]:
        """List every contact ordered by creation date key."""
        self._contacts = self._database.contacts_sorted_by_creation()
        return list(self._contacts)

    def filter_by_creation(self, start: str, end: str) -> list[Contact]:
        """List the contacts created between two ``dd/MM/yyyy`` dates."""
        self._contacts = self._database.contacts_created_between(start, end)
        return list(self._contacts)