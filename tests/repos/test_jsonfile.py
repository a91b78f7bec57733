from datetime import datetime, timezone
import json
import os
import stat
from pathlib import Path
import pytest
from notesweb.conf import JsonRepoConf
from notesweb.models import Note
from notesweb.repos.base import ParseError
from notesweb.repos import jsonfile
from notesweb.repos.jsonfile import JsonFileRepo


def config():
    return JsonRepoConf(path='/notes/my-notes.json')


def test_instantiate(fs):
    assert isinstance(config().instantiate(), JsonFileRepo)
    with pytest.raises(ValueError):
        JsonFileRepo(JsonRepoConf(path=''))


def test_load_creates_file(fs):
    fs.create_dir('/notes')
    repo = config().instantiate()
    assert repo.load() == []
    assert json.loads(Path('/notes/my-notes.json').read_text()) == []
    assert repo.load() == []


def test_load(fs):
    doc = """[
  {
    "title": "Second",
    "content": "Edited",
    "createdAt": "2012-05-02T03:04:05.000Z",
    "updatedAt": "2012-05-03T00:00:00.000Z"
  },
  {
    "title": "First",
    "content": "Hello",
    "createdAt": "2012-05-01T10:00:00.000Z"
  }
]"""
    fs.create_file('/notes/my-notes.json', contents=doc)
    notes = config().instantiate().load()
    assert notes == [
        Note('Second', 'Edited',
             datetime(2012, 5, 2, 3, 4, 5, tzinfo=timezone.utc),
             datetime(2012, 5, 3, tzinfo=timezone.utc)),
        Note('First', 'Hello', datetime(2012, 5, 1, 10, tzinfo=timezone.utc)),
    ]


def test_save(fs):
    fs.create_dir('/notes')
    repo = config().instantiate()
    repo.save([
        Note('Second', 'Ünïcode', datetime(2012, 5, 2, 3, 4, 5, tzinfo=timezone.utc),
             datetime(2012, 5, 3, tzinfo=timezone.utc)),
        Note('First', 'Hello', datetime(2012, 5, 1, 10, tzinfo=timezone.utc)),
    ])
    text = Path('/notes/my-notes.json').read_text(encoding='utf-8')
    assert text.startswith('[\n  {\n    "title": "Second"')
    assert json.loads(text) == [
        {'title': 'Second', 'content': 'Ünïcode',
         'createdAt': '2012-05-02T03:04:05.000Z', 'updatedAt': '2012-05-03T00:00:00.000Z'},
        {'title': 'First', 'content': 'Hello', 'createdAt': '2012-05-01T10:00:00.000Z'},
    ]
    assert os.listdir('/notes') == ['my-notes.json']


def test_save_overwrites(fs):
    fs.create_dir('/notes')
    repo = config().instantiate()
    repo.save([Note('A', 'B', datetime(2012, 5, 2, tzinfo=timezone.utc))])
    repo.save([])
    assert repo.load() == []


def test_load_invalid_json(fs):
    fs.create_file('/notes/my-notes.json', contents='[{"title": ')
    with pytest.raises(ParseError) as excinfo:
        config().instantiate().load()
    assert excinfo.value.path == '/notes/my-notes.json'
    assert isinstance(excinfo.value.cause, ValueError)


def test_load_not_an_array(fs):
    fs.create_file('/notes/my-notes.json', contents='{"title": "A"}')
    with pytest.raises(ParseError, match='array'):
        config().instantiate().load()


def test_load_malformed_note(fs):
    fs.create_file('/notes/my-notes.json', contents='[{"title": "A", "content": "B"}]')
    with pytest.raises(ParseError, match='malformed'):
        config().instantiate().load()
    fs.create_file('/notes/other.json', contents='[{"title": "A", "content": "B", "createdAt": "soon"}]')
    with pytest.raises(ParseError, match='malformed'):
        JsonRepoConf(path='/notes/other.json').instantiate().load()
    for i, doc in enumerate(['["just a string"]', '[null]',
                             '[{"title": "A", "content": "B", "createdAt": 1336000000000}]']):
        fs.create_file(f'/notes/bad{i}.json', contents=doc)
        with pytest.raises(ParseError, match='malformed'):
            JsonRepoConf(path=f'/notes/bad{i}.json').instantiate().load()


def test_save_missing_directory(fs):
    with pytest.raises(OSError):
        config().instantiate().save([])


def test_load_naive_timestamp_is_utc(fs):
    fs.create_file('/notes/my-notes.json', contents='[{"title": "A", "content": "B", "createdAt": "2012-05-02T03:04:05"}]')
    repo = config().instantiate()
    repo.save(repo.load())
    assert json.loads(Path('/notes/my-notes.json').read_text())[0]['createdAt'] == '2012-05-02T03:04:05.000Z'


def test_save_keeps_mode(fs):
    fs.create_file('/notes/my-notes.json', contents='[]')
    os.chmod('/notes/my-notes.json', 0o644)
    config().instantiate().save([Note('A', 'B', datetime(2012, 5, 2, tzinfo=timezone.utc))])
    assert stat.S_IMODE(os.stat('/notes/my-notes.json').st_mode) == 0o644
    os.chmod('/notes/my-notes.json', 0o640)
    config().instantiate().save([])
    assert stat.S_IMODE(os.stat('/notes/my-notes.json').st_mode) == 0o640


def test_save_new_file_mode(fs):
    fs.create_dir('/notes')
    previous = os.umask(0o022)
    try:
        config().instantiate().save([])
    finally:
        os.umask(previous)
    assert stat.S_IMODE(os.stat('/notes/my-notes.json').st_mode) == 0o644


def test_save_relative_path(fs, mocker):
    fs.create_dir('/notes')
    fs.cwd = '/notes'
    spy = mocker.spy(jsonfile, 'mkstemp')
    repo = JsonFileRepo(JsonRepoConf(path='my-notes.json'))
    repo.save([])
    assert spy.call_args[1]['dir'] == os.curdir
    assert os.listdir('/notes') == ['my-notes.json']
    assert repo.load() == []
