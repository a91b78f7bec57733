import pytest
from notesweb.conf import NoteswebConf, MemoryRepoConf
from notesweb.web import create_app


@pytest.fixture
def nw():
    return NoteswebConf(repo_conf=MemoryRepoConf()).instantiate()


@pytest.fixture
def client(nw):
    app = create_app(nw)
    app.testing = True
    return app.test_client()
