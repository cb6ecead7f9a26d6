"""Operations on games."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from gamecatalog.creator_controller import NotFound
from gamecatalog.dtos import CreateGame, UpdateGame
from gamecatalog.models import Creator, Game


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


def _find(db: sqlite3.Connection, model: type, record_id: Any):
    row = db.execute(
        f'SELECT {_column_list(model.COLUMNS)} FROM "{model.TABLE}" WHERE "id" = ?',
        (str(_as_uuid(record_id)),),
    ).fetchone()
    return None if row is None else model.from_row(row)


def create_game(db: sqlite3.Connection, payload: CreateGame | Any) -> Game:
    """Store a new game and return it."""
    body = payload if isinstance(payload, CreateGame) else CreateGame.from_json(payload)
    now = datetime.now(timezone.utc)
    game = Game(
        id=uuid.uuid4(),
        name=body.name,
        description=body.description,
        genre=body.genre,
        creator_id=body.creator_id,
        created_at=now,
        updated_at=now,
    )
    values = game.to_dict()
    marks = ", ".join("?" for _ in Game.COLUMNS)
    _write(
        db,
        f'INSERT INTO "{Game.TABLE}" ({_column_list(Game.COLUMNS)}) VALUES ({marks})',
        tuple(values[name] for name in Game.COLUMNS),
    )
    return game


def list_games(db: sqlite3.Connection) -> list[Game]:
    """Every stored game."""
    rows = db.execute(f'SELECT {_column_list(Game.COLUMNS)} FROM "{Game.TABLE}"').fetchall()
    return [Game.from_row(row) for row in rows]


def get_game(db: sqlite3.Connection, game_id: Any) -> Game:
    """The game with the given id; raises NotFound if there is none."""
    game = _find(db, Game, game_id)
    if game is None:
        raise NotFound("Game not found")
    return game


def update_game(db: sqlite3.Connection, game_id: Any, payload: UpdateGame | Any) -> Game:
    """Change the fields given in ``payload`` and return the updated game."""
    body = payload if isinstance(payload, UpdateGame) else UpdateGame.from_json(payload)
    current = get_game(db, game_id)
    changes = {
        name: value
        for name, value in (
            ("name", body.name),
            ("description", body.description),
            ("genre", body.genre),
            ("creator_id", body.creator_id),
        )
        if value is not None
    }
    updated = replace(current, **changes, updated_at=datetime.now(timezone.utc))
    values = updated.to_dict()
    editable = tuple(name for name in Game.COLUMNS if name != "id")
    assignments = ", ".join(f'"{name}" = ?' for name in editable)
    _write(
        db,
        f'UPDATE "{Game.TABLE}" SET {assignments} WHERE "id" = ?',
        tuple(values[name] for name in editable) + (values["id"],),
    )
    return updated


def delete_game(db: sqlite3.Connection, game_id: Any) -> None:
    """Remove a game."""
    game = get_game(db, game_id)
    _write(db, f'DELETE FROM "{Game.TABLE}" WHERE "id" = ?', (str(game.id),))


def get_game_with_creator(db: sqlite3.Connection, game_id: Any) -> tuple[Game, Creator]:
    """The game with the given id together with its creator."""
    game = get_game(db, game_id)
    creator = _find(db, Creator, game.creator_id)
    if creator is None:
        raise NotFound("Creator not found")
    return game, creator