"""SQLite address book with interactions, to-do items and Julian calendar types."""

__version__ = "0.1.0"