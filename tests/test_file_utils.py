"""Tests for file utilities."""

import pytest

from utils.file_utils import (
    filter_overlapping_paths, format_permissions, format_size, is_hidden_name,
    parse_permissions, parse_size,
)


class TestParseSize:
    @pytest.mark.parametrize('text, expected', [
        ('100', 100),
        ('0', 0),
        ('5KB', 5 * 1024),
        ('5k', 5 * 1024),
        ('1.5MB', int(1.5 * 1024 ** 2)),
        ('2 GB', 2 * 1024 ** 3),
        ('any', 0),
    ])
    def test_valid(self, text, expected):
        assert parse_size(text) == expected

    @pytest.mark.parametrize('text', ['abc', '-5', '1.2.3', '10XB'])
    def test_invalid(self, text):
        with pytest.raises(ValueError, match='Invalid size format'):
            parse_size(text)


class TestPermissions:
    @pytest.mark.parametrize('text, expected', [
        ('755', 0o755),
        ('0644', 0o644),
        ('0o600', 0o600),
        ('rwxr-xr-x', 0o755),
        ('rw-r--r--', 0o644),
        ('rwsr-xr-t', 0o755),
    ])
    def test_parse(self, text, expected):
        assert parse_permissions(text) == expected

    @pytest.mark.parametrize('text', ['999', 'rwx', 'abcdefghi', ''])
    def test_parse_invalid(self, text):
        with pytest.raises(ValueError, match='Invalid permission descriptor'):
            parse_permissions(text)

    def test_format(self):
        assert format_permissions(0o640) == 'rw-r-----'


def test_format_size():
    assert format_size(512) == '512 B'
    assert format_size(2048) == '2.0 KB'


def test_is_hidden_name():
    assert is_hidden_name('.git')
    assert not is_hidden_name('git')


class TestFilterOverlappingPaths:
    def test_nested_paths_dropped(self, tmp_path):
        child = tmp_path / 'child'
        child.mkdir()
        assert filter_overlapping_paths([tmp_path, child]) == [tmp_path]
        assert filter_overlapping_paths([child, tmp_path]) == [tmp_path]

    def test_duplicates_dropped(self, tmp_path):
        assert filter_overlapping_paths([tmp_path, tmp_path]) == [tmp_path]

    def test_order_kept(self, tmp_path):
        a, b = tmp_path / 'a', tmp_path / 'b'
        a.mkdir()
        b.mkdir()
        assert filter_overlapping_paths([b, a]) == [b, a]
