"""Operations on creators and on the games that belong to them."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from gamecatalog.dtos import CreateCreator, UpdateCreator
from gamecatalog.models import Creator, Game


class NotFound(LookupError):
    """The requested record does not exist."""


def _as_uuid(value: Any) -> uuid.UUID:
    return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))


def _column_list(names: tuple[str, ...]) -> str:
    return ", ".join(f'"{name}"' for name in names)


def _write(db: sqlite3.Connection, sql: str, params: tuple[Any, ...]) -> None:
    try:
        db.execute(sql, params)
        db.commit()
    except sqlite3.Error:
        db.rollback()
        raise


def _find(db: sqlite3.Connection, creator_id: Any) -> Creator | None:
    row = db.execute(
        f'SELECT {_column_list(Creator.COLUMNS)} FROM "{Creator.TABLE}" WHERE "id" = ?',
        (str(_as_uuid(creator_id)),),
    ).fetchone()
    return None if row is None else Creator.from_row(row)


def create_creator(db: sqlite3.Connection, payload: CreateCreator | Any) -> Creator:
    """Store a new creator and return it."""
    body = payload if isinstance(payload, CreateCreator) else CreateCreator.from_json(payload)
    now = datetime.now(timezone.utc)
    creator = Creator(
        id=uuid.uuid4(),
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        created_at=now,
        updated_at=now,
    )
    values = creator.to_dict()
    marks = ", ".join("?" for _ in Creator.COLUMNS)
    _write(
        db,
        f'INSERT INTO "{Creator.TABLE}" ({_column_list(Creator.COLUMNS)}) VALUES ({marks})',
        tuple(values[name] for name in Creator.COLUMNS),
    )
    return creator


def get_all_creators(db: sqlite3.Connection) -> list[Creator]:
    """Every stored creator."""
    rows = db.execute(
        f'SELECT {_column_list(Creator.COLUMNS)} FROM "{Creator.TABLE}"'
    ).fetchall()
    return [Creator.from_row(row) for row in rows]


def get_creator_by_id(db: sqlite3.Connection, creator_id: Any) -> Creator:
    """The creator with the given id; raises NotFound if there is none."""
    creator = _find(db, creator_id)
    if creator is None:
        raise NotFound("Creator not found")
    return creator


def update_creator(
    db: sqlite3.Connection, creator_id: Any, payload: UpdateCreator | Any
) -> Creator:
    """Change the fields given in ``payload`` and return the updated creator."""
    body = payload if isinstance(payload, UpdateCreator) else UpdateCreator.from_json(payload)
    current = get_creator_by_id(db, creator_id)
    changes = {
        name: value
        for name, value in (
            ("first_name", body.first_name),
            ("last_name", body.last_name),
            ("email", body.email),
        )
        if value is not None
    }
    updated = replace(current, **changes, updated_at=datetime.now(timezone.utc))
    values = updated.to_dict()
    editable = tuple(name for name in Creator.COLUMNS if name != "id")
    assignments = ", ".join(f'"{name}" = ?' for name in editable)
    _write(
        db,
        f'UPDATE "{Creator.TABLE}" SET {assignments} WHERE "id" = ?',
        tuple(values[name] for name in editable) + (values["id"],),
    )
    return updated


def delete_creator(db: sqlite3.Connection, creator_id: Any) -> None:
    """Remove a creator, and with it the creator's games."""
    creator = get_creator_by_id(db, creator_id)
    _write(db, f'DELETE FROM "{Creator.TABLE}" WHERE "id" = ?', (str(creator.id),))


def get_games_by_creator(db: sqlite3.Connection, creator_id: Any) -> list[Game]:
    """All games whose creator has the given id."""
    rows = db.execute(
        f'SELECT {_column_list(Game.COLUMNS)} FROM "{Game.TABLE}" WHERE "creator_id" = ?',
        (str(_as_uuid(creator_id)),),
    ).fetchall()
    return [Game.from_row(row) for row in rows]