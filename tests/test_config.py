import pytest

import app as app_module
from config import Config, DEFAULT_PORT, find_project_root, resolve_port


def test_find_project_root_walks_upward(tmp_path):
    (tmp_path / 'data' / 'bible').mkdir(parents=True)
    nested = tmp_path / 'a' / 'b'
    nested.mkdir(parents=True)
    assert find_project_root(nested) == tmp_path.resolve()


def test_find_project_root_needs_chapter_directory(tmp_path):
    (tmp_path / 'data').mkdir()
    start = tmp_path / 'src'
    start.mkdir()
    assert find_project_root(start, max_steps=1) == start.resolve()


def test_find_project_root_is_bounded(tmp_path):
    (tmp_path / 'data' / 'bible').mkdir(parents=True)
    deep = tmp_path / 'a' / 'b' / 'c'
    deep.mkdir(parents=True)
    assert find_project_root(deep, max_steps=2) == deep.resolve()
    assert find_project_root(deep, max_steps=3) == tmp_path.resolve()


def test_resolve_port_priority(monkeypatch):
    monkeypatch.delenv('PORT', raising=False)
    assert resolve_port() == DEFAULT_PORT == 3000

    monkeypatch.setenv('PORT', '8080')
    assert resolve_port() == 8080
    assert resolve_port('9000') == 9000


def test_resolve_port_rejects_garbage(monkeypatch):
    monkeypatch.setenv('PORT', 'http')
    with pytest.raises(ValueError):
        resolve_port()
    with pytest.raises(ValueError):
        resolve_port('70000')


def test_config_from_env(monkeypatch, tmp_path):
    (tmp_path / 'data' / 'bible').mkdir(parents=True)
    monkeypatch.delenv('BIBLE_DIR', raising=False)
    monkeypatch.setenv('PUBLIC_DIR', 'web')
    monkeypatch.setenv('PORT', '4000')
    config = Config.from_env(tmp_path)
    assert config['PROJECT_ROOT'] == tmp_path.resolve()
    assert config['BIBLE_DIR'] == tmp_path.resolve() / 'data' / 'bible'
    assert config['PUBLIC_DIR'] == tmp_path.resolve() / 'web'
    assert config['PORT'] == 4000
    assert config['SEARCH_DEFAULT_LIMIT'] == 25
    assert config['PREVIEW_CHARS'] == 90


def test_parse_args():
    args = app_module.parse_args(['--port', '5000', '--debug'])
    assert args.port == '5000'
    assert args.debug is True
    assert app_module.parse_args([]).port is None


def test_request_logging(client, caplog):
    with caplog.at_level('INFO', logger='app'):
        client.get('/api/books')
    assert any(record.getMessage().startswith('GET /api/books 200 ') for record in caplog.records)
