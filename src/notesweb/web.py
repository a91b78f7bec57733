"""Serves the notes as a small HTML application; see :func:`create_app`."""

import logging
import os.path
import re

from flask import Flask, redirect, request, url_for
from mako.lookup import TemplateLookup

from notesweb.api import Notesweb, MissingFieldError


logger = logging.getLogger(__name__)

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')


def template_lookup() -> TemplateLookup:
    """Returns the lookup for the bundled Mako templates.

    Every ``${...}`` expression is HTML-escaped unless the template explicitly opts out with ``| n``.
    """
    return TemplateLookup(directories=[TEMPLATE_DIR], default_filters=['str', 'h'], input_encoding='utf-8')


def parse_index(note_id: str) -> int:
    """Converts the id from a URL into a note index. Anything that isn't a plain integer becomes -1, which is never valid."""
    if not re.fullmatch(r'-?[0-9]+', note_id):
        return -1
    return int(note_id)


def create_app(nw: Notesweb) -> Flask:
    """Builds the Flask application serving the notes in the given :class:`Notesweb`.

    Routes:

    * ``GET /`` lists the notes, with a form for adding one
    * ``POST /add-note`` creates a note from the ``title`` and ``content`` form fields
    * ``GET /edit/<id>`` shows a form for editing the note at index ``id``
    * ``POST /update/<id>`` saves the edit form
    * ``GET /delete/<id>`` deletes the note at index ``id``

    Every action except rendering a page redirects, and invalid input is silently ignored.
    """
    app = Flask(__name__)
    lookup = template_lookup()

    def render(name: str, **kwargs) -> str:
        return lookup.get_template(name).render(**kwargs)

    @app.route('/')
    def list_notes():
        return render('list.mako',
                      notes=nw.notes(),
                      add_url=url_for('add_note'),
                      edit_url=lambda i: url_for('edit_note', note_id=i),
                      delete_url=lambda i: url_for('delete_note', note_id=i))

    @app.route('/add-note', methods=['POST'])
    def add_note():
        try:
            nw.add(request.form.get('title', ''), request.form.get('content', ''))
            logger.info('Created note')
        except MissingFieldError as e:
            logger.debug('Ignoring new note: %s', e)
        return redirect(url_for('list_notes'))

    @app.route('/edit/<note_id>')
    def edit_note(note_id):
        index = parse_index(note_id)
        note = nw.note(index)
        if note is None:
            logger.debug('No note to edit at index %s', note_id)
            return redirect(url_for('list_notes'))
        return render('edit.mako',
                      note=note,
                      update_url=url_for('update_note', note_id=index),
                      list_url=url_for('list_notes'))

    @app.route('/update/<note_id>', methods=['POST'])
    def update_note(note_id):
        index = parse_index(note_id)
        try:
            note = nw.update(index, request.form.get('title', ''), request.form.get('content', ''))
        except MissingFieldError as e:
            logger.debug('Ignoring edit of note %s: %s', note_id, e)
            return redirect(url_for('edit_note', note_id=note_id))
        if note is None:
            logger.debug('No note to update at index %s', note_id)
        else:
            logger.info('Updated note %d', index)
        return redirect(url_for('list_notes'))

    @app.route('/delete/<note_id>')
    def delete_note(note_id):
        index = parse_index(note_id)
        if nw.delete(index) is None:
            logger.debug('No note to delete at index %s', note_id)
        else:
            logger.info('Deleted note %d', index)
        return redirect(url_for('list_notes'))

    return app
