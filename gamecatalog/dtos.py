"""Request bodies accepted by the catalogue's endpoints."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Mapping


class ValidationError(ValueError):
    """A request body does not have the expected shape."""


def _object(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError("invalid type: expected a JSON object")
    return data


def _string(data: Mapping[str, Any], name: str, required: bool) -> str | None:
    if name not in data:
        if required:
            raise ValidationError(f"missing field `{name}`")
        return None
    value = data[name]
    if value is None and not required:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"invalid type for field `{name}`: expected a string")
    return value


def _uuid(data: Mapping[str, Any], name: str, required: bool) -> uuid.UUID | None:
    text = _string(data, name, required)
    if text is None:
        return None
    try:
        return uuid.UUID(text)
    except ValueError:
        raise ValidationError(f"invalid UUID for field `{name}`") from None


@dataclass(frozen=True)
class CreateCreator:
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_json(cls, data: Any) -> "CreateCreator":
        body = _object(data)
        return cls(
            first_name=_string(body, "first_name", True),
            last_name=_string(body, "last_name", True),
            email=_string(body, "email", True),
        )


@dataclass(frozen=True)
class UpdateCreator:
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> "UpdateCreator":
        body = _object(data)
        return cls(
            first_name=_string(body, "first_name", False),
            last_name=_string(body, "last_name", False),
            email=_string(body, "email", False),
        )


@dataclass(frozen=True)
class CreateGame:
    name: str
    description: str
    genre: str
    creator_id: uuid.UUID

    @classmethod
    def from_json(cls, data: Any) -> "CreateGame":
        body = _object(data)
        return cls(
            name=_string(body, "name", True),
            description=_string(body, "description", True),
            genre=_string(body, "genre", True),
            creator_id=_uuid(body, "creator_id", True),
        )


@dataclass(frozen=True)
class UpdateGame:
    name: str | None = None
    description: str | None = None
    genre: str | None = None
    creator_id: uuid.UUID | None = None

    @classmethod
    def from_json(cls, data: Any) -> "UpdateGame":
        body = _object(data)
        return cls(
            name=_string(body, "name", False),
            description=_string(body, "description", False),
            genre=_string(body, "genre", False),
            creator_id=_uuid(body, "creator_id", False),
        )