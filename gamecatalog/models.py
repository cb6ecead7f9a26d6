"""Stored records of the catalogue: creators and their games."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar, Mapping


def _parse_uuid(value: Any) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value))


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        moment = value
    else:
        text = str(value).strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _format_timestamp(moment: datetime) -> str:
    return _parse_timestamp(moment).isoformat().replace("+00:00", "Z")


@dataclass
class Creator:
    """A row of the ``creators`` table."""

    TABLE: ClassVar[str] = "creators"
    COLUMNS: ClassVar[tuple[str, ...]] = (
        "id", "first_name", "last_name", "email", "created_at", "updated_at",
    )

    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        self.id = _parse_uuid(self.id)
        self.created_at = _parse_timestamp(self.created_at)
        self.updated_at = _parse_timestamp(self.updated_at)

    def to_dict(self) -> dict[str, str]:
        """JSON-ready form, also used as the stored column values."""
        return {
            "id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Creator":
        """Build a creator from a database row or mapping."""
        return cls(**{name: row[name] for name in cls.COLUMNS})


@dataclass
class Game:
    """A row of the ``games`` table; each game belongs to one creator."""

    TABLE: ClassVar[str] = "games"
    COLUMNS: ClassVar[tuple[str, ...]] = (
        "id", "name", "description", "genre", "creator_id", "created_at", "updated_at",
    )

    id: uuid.UUID
    name: str
    description: str
    genre: str
    creator_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        self.id = _parse_uuid(self.id)
        self.creator_id = _parse_uuid(self.creator_id)
        self.created_at = _parse_timestamp(self.created_at)
        self.updated_at = _parse_timestamp(self.updated_at)

    def to_dict(self) -> dict[str, str]:
        """JSON-ready form, also used as the stored column values."""
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "genre": self.genre,
            "creator_id": str(self.creator_id),
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Game":
        """Build a game from a database row or mapping."""
        return cls(**{name: row[name] for name in cls.COLUMNS})