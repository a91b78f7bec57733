"""Defines the :class:`Note` class and helpers for serializing its timestamps."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


def format_timestamp(value: datetime) -> str:
    """Formats a datetime as UTC ISO-8601 with millisecond precision, e.g. ``2012-05-02T03:04:05.000Z``.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime('%Y-%m-%dT%H:%M:%S.') + f'{value.microsecond // 1000:03d}Z'


def parse_timestamp(value: str) -> datetime:
    """Parses an ISO-8601 timestamp. A trailing ``Z`` is accepted as UTC, as is a value with no offset at all.

    Raises :exc:`TypeError` if the value is not a string, or :exc:`ValueError` if it is not a valid timestamp.
    """
    if not isinstance(value, str):
        raise TypeError(f'Timestamp must be a string, not {type(value).__name__}')
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    result = datetime.fromisoformat(value)
    if result.tzinfo is None:
        result = result.replace(tzinfo=timezone.utc)
    return result


@dataclass
class Note:
    """A single note.

    Notes have no identifier of their own; they are addressed by their position in the
    list returned from :meth:`notesweb.repos.base.Repo.load`.
    """

    title: str

    content: str

    created: datetime
    """When the note was first submitted."""

    updated: Optional[datetime] = None
    """When the note was last edited, or None if it never has been."""

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        result = {
            'title': self.title,
            'content': self.content,
            'createdAt': format_timestamp(self.created),
        }
        if self.updated:
            result['updatedAt'] = format_timestamp(self.updated)
        return result

    @classmethod
    def from_json(cls, data: dict) -> Note:
        """Builds an instance from a dict in the format produced by :meth:`as_json`.

        Raises :exc:`TypeError` if data is not a dict or a timestamp is not a string, :exc:`KeyError` if a required
        key is missing, or :exc:`ValueError` if a timestamp is invalid.
        """
        if not isinstance(data, dict):
            raise TypeError(f'Note must be an object, not {type(data).__name__}')
        updated = data.get('updatedAt')
        return cls(
            title=data['title'],
            content=data['content'],
            created=parse_timestamp(data['createdAt']),
            updated=parse_timestamp(updated) if updated else None,
        )
