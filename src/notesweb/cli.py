"""Command-line interface for notesweb."""


import argparse
from dataclasses import replace
import json
import logging
from terminaltables import AsciiTable
from notesweb.api import Notesweb
from notesweb.conf import NoteswebConf, JsonRepoConf
from notesweb.web import create_app


logger = logging.getLogger(__name__)


def _timestamp(value) -> str:
    return value.strftime('%Y-%m-%d %H:%M') if value else ''


def _serve(args, nw: Notesweb) -> int:
    host = args.host[0] if args.host else nw.conf.host
    port = args.port[0] if args.port else nw.conf.port
    debug = args.debug or nw.conf.debug
    app = create_app(nw)
    logger.info('Server running at http://%s:%d', host, port)
    app.run(host=host, port=port, debug=debug)
    return 0


def _list(args, nw: Notesweb) -> int:
    notes = nw.notes()
    if args.json:
        print(json.dumps([n.as_json() for n in notes]))
    elif args.table:
        data = [('#', 'Title', 'Created', 'Updated')]
        data.extend((i, n.title, _timestamp(n.created), _timestamp(n.updated)) for i, n in enumerate(notes))
        table = AsciiTable(data)
        table.justify_columns[0] = 'right'
        print(table.table)
    else:
        for i, note in enumerate(notes):
            print('--------------------')
            print(f'index: {i}')
            print(f'title: {note.title}')
            print(f'created: {note.created}')
            if note.updated:
                print(f'updated: {note.updated}')
            print(note.content)
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.set_defaults(func=None, notes_file=None)

    subs = parser.add_subparsers(title='Commands')

    file_help = ('JSON file to store notes in. Overrides conf.repo_conf from ~/.notesweb.conf.py. '
                 'The file is created if it does not exist.')

    p_serve = subs.add_parser('serve', help='Run the web server.')
    p_serve.add_argument('-H', '--host', nargs=1, help='Interface to listen on. Defaults to conf.host (127.0.0.1).')
    p_serve.add_argument('-P', '--port', nargs=1, type=int, help='Port to listen on. Defaults to conf.port (3000).')
    p_serve.add_argument('-f', '--notes-file', nargs=1, help=file_help)
    p_serve.add_argument('--debug', action='store_true', help='Run Flask in debug mode.')
    p_serve.set_defaults(func=_serve)

    p_list = subs.add_parser('list', help='Show all notes, newest first, with the index used to address them.')
    p_list.add_argument('-f', '--notes-file', nargs=1, help=file_help)
    p_list_formats = p_list.add_mutually_exclusive_group()
    p_list_formats.add_argument('-j', '--json', action='store_true',
                                help='Output as JSON, in the same format as the notes file.')
    p_list_formats.add_argument('-t', '--table', action='store_true', help='Format output as a table.')
    p_list.set_defaults(func=_list)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    if not args.func:
        parser.print_help()
        return 1
    conf = NoteswebConf.for_user()
    if args.notes_file:
        conf = replace(conf, repo_conf=JsonRepoConf(path=args.notes_file[0]))
    logging.basicConfig(level=conf.log_level.upper(), format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    with conf.instantiate() as nw:
        return args.func(args, nw)
