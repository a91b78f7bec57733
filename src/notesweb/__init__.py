"""A small web application for keeping notes in a JSON file.

If you installed via ``pip``, run ``notesweb serve`` and open http://localhost:3000/.

To use the Python API, look at :class:`notesweb.api.Notesweb`
"""
