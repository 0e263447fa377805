# carnetdb

A small address book kept in an SQLite file. It stores contacts, the
interactions you had with each contact, and the to-do items that came out of
those interactions. Dates are entered and shown as `dd/MM/yyyy` and stored as
ISO `yyyy-MM-dd` text, so date-range queries work in SQL. The tables are
created on first open.

The package also carries a set of proleptic Julian calendar types (day, month,
year, weekday and the composite year/month/day forms) with their arithmetic
and validity checks.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Records and dates

`carnetdb.models` holds three dataclasses:

- `Contact`: `last_name`, `first_name`, `company`, `email`, `phone`,
  `photo_url`, `created`, `edited`, `id`, and an `interactions` list.
- `Interaction`: `content`, `date`, `id`, `contact_id`.
- `Todo`: `task`, `due_date`, `contact_id`.

`to_iso_date("05/03/2024")` gives `"2024-03-05"`; `to_display_date` turns an
ISO string or a `date` back into `dd/MM/yyyy`. Both return `""` for input that
is not a valid date.

## Contacts

```python
from carnetdb.models import Contact
from carnetdb.activity import ActivityDatabase
from carnetdb.contacts import ContactManager

with ActivityDatabase("contacts.sqlite") as db:
    manager = ContactManager(db)
    alice = manager.add(Contact(last_name="Martin", first_name="Alice",
                                company="Acme", email="alice@example.com",
                                created="05/03/2024"))
    for contact in manager:
        print(contact.id, contact.last_name, contact.first_name, contact.created)

    manager.find_by_company("Acme")
    manager.sort_alphabetically()
    manager.filter_by_creation("01/01/2024", "31/12/2024")
```

`ContactManager` keeps an in-memory list that mirrors the last query: `reload`,
`find_by_name`, `find_by_company`, `sort_alphabetically`, `sort_by_creation`
and `filter_by_creation` each replace it and return a copy. `len()`,
iteration, `get(contact_id)` and `last_id()` work on that list.

`add` stores a contact and returns it with its new id. `modify(original,
updated)` replaces the listed contact having `original`'s id and updates the
stored rows matching `original`'s last and first names; the stored creation
date is kept from `original`. `remove` drops the listed contact with the same
id and deletes every stored row with the same last and first names.
`add_interaction(contact_id, interaction)` stores an interaction and appends
it to the listed contact's `interactions`; it raises `KeyError` when no listed
contact has that id.

`ContactDatabase` in `carnetdb.database` offers the same contact queries
directly (`insert_contact`, `contacts`, `contacts_by_name`,
`contacts_by_company`, `update_contact`, `delete_contact`,
`contacts_sorted_by_first_name`, `contacts_sorted_by_creation`,
`contacts_created_between`). It can be used as a context manager and closes
the file on exit. Failures of the database are raised as
`carnetdb.database.DatabaseError`, as are queries on a closed database.

## Interactions and to-do items

`ActivityDatabase` extends `ContactDatabase`:

```python
from carnetdb.models import Interaction, Todo
from carnetdb.activity import ActivityDatabase

with ActivityDatabase("contacts.sqlite") as db:
    call = db.insert_interaction(1, Interaction(content="Phone call",
                                                date="06/03/2024"))
    db.insert_todo(Todo(task="Send quote", due_date="10/03/2024"), call.id)

    print(db.interactions_for(1))
    print(db.todos_for(call.id))
    print(db.interactions_between("01/03/2024", "31/03/2024"))
    print(db.todos_between("01/03/2024", "31/03/2024"))
    print(db.todos_between_for_contact("01/03/2024", "31/03/2024", 1))
    db.export_json("export")
```

Date ranges are inclusive. `todos_between` and `todos_between_for_contact`
fill in each item's `contact_id` from its interaction.

`export_json(directory)` writes every table as a JSON array of objects, with
all values as strings, into an existing directory: `contact.json`,
`interaction.json`, `todo.json` and `todoinetarctionassociations.json`. It
returns the paths written.

## Julian calendar

```python
from carnetdb.julian_units import Day, Month, Year
from carnetdb.julian_weekday import Weekday, LAST
from carnetdb.julian_dates import YearMonthDay, YearMonthWeekdayLast

date = YearMonthDay(Year(2000), Month(2), Day(29))
print(date.ok(), date.to_days(), str(date))
print(YearMonthDay.from_days(0))          # 1969-12-19, the Julian date of 1970-01-01

last_sunday = YearMonthWeekdayLast(Year(2024), Month(3), Weekday(0)[LAST])
print(last_sunday.to_days())
```

- `carnetdb.julian_units`: `Day`, `Month` and `Year`, with `ok()`, addition
  and subtraction (wrapping like their stored widths), and the printed forms
  (`"05"`, `"Mar"`, `"2024"`). Every fourth year is a leap year.
- `carnetdb.julian_weekday`: `Weekday` (0 is Sunday), indexed with an integer
  to give `WeekdayIndexed` or with `LAST` to give `WeekdayLast`.
- `carnetdb.julian_partial`: `YearMonth`, `MonthDay`, `MonthDayLast`,
  `MonthWeekday`, `MonthWeekdayLast`.
- `carnetdb.julian_dates`: `YearMonthDay`, `YearMonthDayLast`,
  `YearMonthWeekday`, `YearMonthWeekdayLast`, converting to and from day
  counts since 1970-01-01 (civil) and moving by months or years.

## What it does not do

There is no command-line program and no graphical interface: the package is a
library to be called from Python. It does not create the export directory,
and it does not remove interactions or to-do items when a contact is deleted.