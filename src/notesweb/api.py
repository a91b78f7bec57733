"""Provides the main entry point for using the library, :class:`Notesweb`"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import List, Optional
from notesweb.conf import NoteswebConf
from notesweb.models import Note


class Error(Exception):
    pass


class MissingFieldError(Error):
    """Raised when a note is submitted without a title or without content."""
    def __init__(self, field: str):
        super().__init__(f'Missing required field: {field}')
        self.field = field


def _require(title: str, content: str) -> None:
    if not title:
        raise MissingFieldError('title')
    if not content:
        raise MissingFieldError('content')


class Notesweb:
    """Main entry point for working programmatically with your collection of notes.

    Generally, you should get an instance using the :meth:`Notesweb.for_user` method. Call :meth:`close` when you're
    done with it, or else use it as a context manager.

    Notes are addressed by their index in the list returned by :meth:`notes`. Every method reloads the collection
    from :attr:`repo`, so an index is only meaningful until someone else changes the notes.

    .. attribute:: conf
       :type: notesweb.conf.NoteswebConf

    .. attribute:: repo
       :type: notesweb.repos.base.Repo

    Here's an example:

    .. code-block:: python

       from notesweb.api import Notesweb
       with Notesweb.for_user() as nw:
           nw.add('Groceries', 'eggs, flour')
           print(nw.notes()[0].title)
    """

    @staticmethod
    def for_user() -> Notesweb:
        """Creates an instance using the user's ``~/.notesweb.conf.py`` file, or the default config."""
        return NoteswebConf.for_user().instantiate()

    def __init__(self, conf: NoteswebConf):
        self.conf = conf
        self.repo = conf.repo_conf.instantiate()

    def notes(self) -> List[Note]:
        """Returns every note, newest first."""
        return self.repo.load()

    def note(self, index: int) -> Optional[Note]:
        """Returns the note at the given index, or None if there is no such note."""
        notes = self.repo.load()
        if 0 <= index < len(notes):
            return notes[index]
        return None

    def add(self, title: str, content: str) -> Note:
        """Creates a note at the front of the list and saves it.

        Raises :exc:`MissingFieldError` without touching the repo if either field is empty.
        """
        _require(title, content)
        notes = self.repo.load()
        note = Note(title, content, created=datetime.now(timezone.utc))
        notes.insert(0, note)
        self.repo.save(notes)
        return note

    def update(self, index: int, title: str, content: str) -> Optional[Note]:
        """Replaces the title and content of the note at the given index.

        The creation time is kept and the update time is set to now.
        Raises :exc:`MissingFieldError` without touching the repo if either field is empty.
        Returns the updated note, or None (and changes nothing) if the index is out of range.
        """
        _require(title, content)
        notes = self.repo.load()
        if not 0 <= index < len(notes):
            return None
        note = Note(title, content, created=notes[index].created, updated=datetime.now(timezone.utc))
        notes[index] = note
        self.repo.save(notes)
        return note

    def delete(self, index: int) -> Optional[Note]:
        """Removes the note at the given index; notes after it move down one position.

        Returns the removed note, or None (and changes nothing) if the index is out of range.
        """
        notes = self.repo.load()
        if not 0 <= index < len(notes):
            return None
        removed = notes.pop(index)
        self.repo.save(notes)
        return removed

    def close(self):
        """Closes the associated repo and releases any other resources."""
        self.repo.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.repo.close()
