"""Fixtures compartidos para los tests del generador."""

import pytest


@pytest.fixture
def posts_dir(tmp_path):
    d = tmp_path / "posts"
    d.mkdir()
    return d


@pytest.fixture
def write_post(posts_dir):
    def _write(name, text):
        path = posts_dir / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def config(tmp_path, posts_dir):
    return {
        'blog': {'title': 'Test Blog', 'description': 'Notas', 'author': 'Ana'},
        'posts': {'dir': str(posts_dir)},
        'output': {'dir': str(tmp_path / "web")},
    }
