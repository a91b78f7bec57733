"""Handles storage of the collection of notes.

:class:`notesweb.repos.base.Repo` defines an API.
:class:`notesweb.repos.jsonfile.JsonFileRepo` is the file-backed implementation you usually want to use, while
:class:`notesweb.repos.memory.MemoryRepo` keeps everything in memory.
"""
