"""Defines the API for loading and saving a collection of notes.

The most important class is :class:`Repo`.
"""

from typing import List

from notesweb.models import Note


class ParseError(Exception):
    """Raised when a :class:`Repo` is unable to parse its stored notes."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause


class Repo:
    """Base class for repos, which are responsible for persisting the user's notes.

    The collection is always read and written as a whole. Repos do not lock anything, so two callers
    that each load, change, and save the notes at the same time can overwrite each other's changes.
    """
    def load(self) -> List[Note]:
        """Returns every note, in order.

        If nothing has been stored yet, the storage is initialized with an empty list and an empty list is returned.

        May raise a :exc:`ParseError` or IO-related exception.
        """
        raise NotImplementedError()

    def save(self, notes: List[Note]) -> None:
        """Replaces the stored collection with the given notes.

        May raise an IO-related exception.
        """
        raise NotImplementedError()

    def close(self) -> None:
        """Release any resources associated with the repo. Should be called when you're done with an instance."""
        pass
