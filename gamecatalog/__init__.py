"""A JSON web service for a catalogue of games and their creators, backed by SQLite."""

__version__ = "0.1.0"