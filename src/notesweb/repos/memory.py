"""Provides the :class:`MemoryRepo` class."""

from typing import List

from notesweb.conf import MemoryRepoConf
from notesweb.models import Note
from notesweb.repos.base import Repo


class MemoryRepo(Repo):
    """Keeps notes in memory only; everything is lost when the process exits.

    Notes are held in their serialized form, so each :meth:`load` returns new :class:`Note` instances
    and changes to them have no effect until they are passed to :meth:`save`.

    .. attribute:: conf
       :type: MemoryRepoConf
    """
    def __init__(self, conf: MemoryRepoConf):
        self.conf = conf
        self._data = None

    def load(self) -> List[Note]:
        if self._data is None:
            self.save([])
        return [Note.from_json(item) for item in self._data]

    def save(self, notes: List[Note]) -> None:
        self._data = [note.as_json() for note in notes]
