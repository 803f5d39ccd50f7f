"""Shared fixtures."""

import pytest

from core.config import Config
from core.data_structures import ShellContext
from utils.i18n import translator


@pytest.fixture(autouse=True)
def english():
    """Pin messages to English so assertions do not depend on the locale."""
    previous = translator.current_lang
    translator.set_language('en')
    yield
    translator.set_language(previous)


@pytest.fixture
def config(tmp_path):
    cfg = Config(tmp_path / 'config.json')
    cfg.set('show_progress', False)
    return cfg


@pytest.fixture
def tree(tmp_path):
    """root/a.txt and root/sub/b.txt"""
    root = tmp_path / 'root'
    (root / 'sub').mkdir(parents=True)
    (root / 'a.txt').write_text('a')
    (root / 'sub' / 'b.txt').write_text('b')
    return root


@pytest.fixture
def context(tree):
    return ShellContext(cwd=tree)
