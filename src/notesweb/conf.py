from __future__ import annotations
from dataclasses import dataclass, field, replace
import os.path


@dataclass
class RepoConf:
    """Base class for repo config. Use a subclass such as :class:`JsonRepoConf`."""

    def instantiate(self):
        raise NotImplementedError("Please use a subclass like JsonRepoConf instead!")

    def standardize(self):
        return self


@dataclass
class JsonRepoConf(RepoConf):
    """Configures notesweb to store notes in a JSON file, via :class:`notesweb.repos.jsonfile.JsonFileRepo`."""

    path: str = 'my-notes.json'
    """Path of the JSON file holding the notes.

    The file will be created, containing an empty array, if it does not exist.
    Relative paths are resolved against the current working directory.
    """

    def instantiate(self):
        from notesweb.repos.jsonfile import JsonFileRepo
        return JsonFileRepo(self.standardize())

    def standardize(self):
        return replace(self, path=os.path.realpath(self.path))


@dataclass
class MemoryRepoConf(RepoConf):
    """Configures notesweb to keep notes in memory, via :class:`notesweb.repos.memory.MemoryRepo`.

    Nothing is persisted; this is mostly useful for tests and demos.
    """
    def instantiate(self):
        from notesweb.repos.memory import MemoryRepo
        return MemoryRepo(self.standardize())


@dataclass
class NoteswebConf:
    repo_conf: RepoConf = field(default_factory=JsonRepoConf)
    """Configures where your notes are stored."""

    host: str = '127.0.0.1'
    """Interface the ``serve`` command listens on."""

    port: int = 3000
    """Port the ``serve`` command listens on."""

    debug: bool = False
    """If True, the ``serve`` command runs Flask in debug mode."""

    log_level: str = 'INFO'
    """Name of the logging level used by the command-line tool, such as ``DEBUG`` or ``WARNING``."""

    @classmethod
    def for_user(cls) -> NoteswebConf:
        """Loads config from ``~/.notesweb.conf.py``, or returns the defaults if that file does not exist.

        The file is executed as Python and must assign an instance of this class to the variable ``conf``:

        .. code-block:: python

           from notesweb.conf import *
           conf = NoteswebConf(repo_conf=JsonRepoConf(path='/Users/jacob/notes.json'), port=8080)
        """
        path = os.path.expanduser(os.path.join('~', '.notesweb.conf.py'))
        if not os.path.exists(path):
            return cls()
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise Exception('You need to assign an instance of NoteswebConf to the variable `conf` '
                            f'in your config file: {path}')
        return context['conf']

    def standardize(self):
        return replace(
            self,
            repo_conf=self.repo_conf.standardize()
        )

    def instantiate(self):
        from notesweb.api import Notesweb
        return Notesweb(self.standardize())
