"""Opening the catalogue's database connection."""

from __future__ import annotations

import os
import sqlite3

_SQLITE_PREFIXES = ("sqlite://", "sqlite:")
_MEMORY = ":memory:"


def database_path(url: str) -> str:
    """Turn a database URL into the path that sqlite3 opens.

    Accepts ``sqlite://path``, ``sqlite:path``, ``sqlite::memory:`` and plain
    file paths. Query parameters such as ``?mode=rwc`` are dropped.
    """
    text = url.strip()
    for prefix in _SQLITE_PREFIXES:
        if text.startswith(prefix):
            rest = text[len(prefix):]
            break
    else:
        if "://" in text:
            scheme = text.split("://", 1)[0]
            raise ValueError(f"unsupported database URL scheme: {scheme!r}")
        rest = text
    rest = rest.split("?", 1)[0]
    if rest in ("", _MEMORY):
        return _MEMORY
    return rest


def connect(url: str | None = None) -> sqlite3.Connection:
    """Open the database named by ``url`` or by the DATABASE_URL variable."""
    if url is None:
        url = os.environ.get("DATABASE_URL")
        if not url:
            raise RuntimeError("DATABASE_URL must be set")
    conn = sqlite3.connect(database_path(url), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn