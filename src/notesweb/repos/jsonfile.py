"""Provides the :class:`JsonFileRepo` class."""

import json
import logging
import os
import os.path
import stat
from tempfile import mkstemp
from typing import List

from notesweb.conf import JsonRepoConf
from notesweb.models import Note
from notesweb.repos.base import Repo, ParseError


logger = logging.getLogger(__name__)


def _file_mode(path: str) -> int:
    """Returns the permission bits of the existing file, or the default for a new file under the current umask."""
    if os.path.exists(path):
        return stat.S_IMODE(os.stat(path).st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class JsonFileRepo(Repo):
    """Stores notes as a JSON array in a single file.

    The file is read in full on every :meth:`load` and replaced in full on every :meth:`save`.

    .. attribute:: conf
       :type: JsonRepoConf
    """
    def __init__(self, conf: JsonRepoConf):
        self.conf = conf
        if not conf.path:
            raise ValueError('`path` must be non-empty in JsonRepoConf.')

    def load(self) -> List[Note]:
        path = self.conf.path
        if not os.path.exists(path):
            logger.info('Creating empty notes file at %s', path)
            self.save([])
            return []

        with open(path, 'r', encoding='utf-8') as file:
            try:
                data = json.load(file)
            except ValueError as e:
                raise ParseError(f'Notes file is not valid JSON: {e}', path, e)
        if not isinstance(data, list):
            raise ParseError('Notes file does not contain a JSON array', path)
        try:
            return [Note.from_json(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(f'Notes file contains a malformed note: {e!r}', path, e)

    def save(self, notes: List[Note]) -> None:
        path = self.conf.path
        dirname, basename = os.path.split(path)
        fd, tmp = mkstemp(prefix=f'.{basename}', dir=dirname or os.curdir)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as file:
                json.dump([note.as_json() for note in notes], file, indent=2, ensure_ascii=False)
            # mkstemp always uses 0600; keep the mode an ordinary write would leave
            os.chmod(tmp, _file_mode(path))
            os.replace(tmp, path)
        except BaseException:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise
        logger.debug('Saved %d notes to %s', len(notes), path)
