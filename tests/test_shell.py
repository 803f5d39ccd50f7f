"""Tests for the command dispatcher and its handlers."""

import os
import pathlib

import pytest

from core.data_structures import ShellContext
from core.shell import FinderShell, change_directory, dispatch, list_directory
from utils.platform_utils import NavigationError


class TestCd:
    """Navigation keeps the working directory on every error."""

    def test_nonexistent_leaves_cwd_unchanged(self, context, config, capsys):
        new_context, keep_running = dispatch('cd nonexistent', context, config)
        assert keep_running
        assert new_context.cwd == context.cwd
        assert "No such directory: 'nonexistent'" in capsys.readouterr().err

    def test_into_file_rejected(self, context, config, capsys):
        new_context, _ = dispatch('cd a.txt', context, config)
        assert new_context.cwd == context.cwd
        assert 'Cannot cd into a file' in capsys.readouterr().err

    def test_child_and_parent(self, context, config):
        child, _ = dispatch('cd sub', context, config)
        assert child.cwd == context.cwd / 'sub'
        parent, _ = dispatch('cd ..', child, config)
        assert parent.cwd == context.cwd

    def test_absolute_path(self, context, config, tmp_path):
        other = tmp_path / 'elsewhere'
        other.mkdir()
        new_context, _ = dispatch(f'cd {other}', context, config)
        assert new_context.cwd == other.resolve()

    def test_nested_name_rejected(self, context, config, capsys):
        (context.cwd / 'sub' / 'inner').mkdir()
        new_context, _ = dispatch('cd sub/inner', context, config)
        assert new_context.cwd == context.cwd
        assert 'No such directory' in capsys.readouterr().err

    def test_hidden_directory_needs_show(self, context, config):
        (context.cwd / '.cache').mkdir()
        with pytest.raises(NavigationError):
            change_directory(context, '.cache')
        shown = context._replace(show_hidden=True)
        assert change_directory(shown, '.cache') == context.cwd / '.cache'

    def test_dot_stays(self, context):
        assert change_directory(context, '.') == context.cwd

    def test_usage_without_argument(self, context, config, capsys):
        new_context, keep_running = dispatch('cd', context, config)
        assert keep_running
        assert new_context == context
        assert 'Usage: cd' in capsys.readouterr().err


class TestLs:
    def test_lists_sorted_names(self, context, config, capsys):
        (context.cwd / '.secret').write_text('s')
        dispatch('ls', context, config)
        assert capsys.readouterr().out.splitlines() == ['a.txt', 'sub']

    def test_show_and_hide(self, context, config, capsys):
        (context.cwd / '.secret').write_text('s')
        shown, _ = dispatch('show', context, config)
        assert shown.show_hidden
        assert list_directory(shown) == ['.secret', 'a.txt', 'sub']

        hidden, _ = dispatch('hide', shown, config)
        assert not hidden.show_hidden
        assert list_directory(hidden) == ['a.txt', 'sub']
        out = capsys.readouterr().out
        assert 'now shown' in out and 'now hidden' in out

    def test_unreadable_directory_reported(self, tmp_path, config, capsys):
        gone = ShellContext(cwd=tmp_path / 'gone')
        new_context, keep_running = dispatch('ls', gone, config)
        assert keep_running
        assert new_context == gone
        assert 'Cannot list' in capsys.readouterr().err


class TestFind:
    def test_prints_one_path_per_line(self, context, config, capsys):
        dispatch(r'find -m \.txt$', context, config)
        out = capsys.readouterr().out
        assert out.splitlines() == [str(context.cwd / 'a.txt'), str(context.cwd / 'sub' / 'b.txt')]

    def test_hidden_entries_follow_context(self, context, config, capsys):
        hidden = context.cwd / '.hidden'
        hidden.mkdir()
        (hidden / 'c.txt').write_text('c')

        dispatch(r'find -m \.txt$', context, config)
        assert 'c.txt' not in capsys.readouterr().out

        dispatch(r'find -m \.txt$', context._replace(show_hidden=True), config)
        assert str(hidden / 'c.txt') in capsys.readouterr().out

    def test_output_file_overwritten(self, context, config, capsys):
        target = context.cwd / 'results.log'
        target.write_text('stale\n')

        dispatch(r'find -m \.txt$ -o results.log', context, config)

        lines = target.read_text(encoding='utf-8').splitlines()
        assert lines == [str(context.cwd / 'a.txt'), str(context.cwd / 'sub' / 'b.txt')]
        out = capsys.readouterr().out
        assert '2 result(s) written to' in out
        assert str(context.cwd / 'a.txt') not in out

    def test_output_file_append_mode(self, context, config):
        config.set('output_mode', 'a')
        target = context.cwd / 'results.log'
        target.write_text('stale\n')

        dispatch(r'find -m a\.txt$ -o results.log', context, config)
        assert target.read_text(encoding='utf-8').splitlines() == ['stale', str(context.cwd / 'a.txt')]

    def test_output_file_cannot_be_opened(self, context, config, capsys):
        dispatch('find -o missing/dir/out.log', context, config)
        captured = capsys.readouterr()
        assert 'Cannot open output file' in captured.err
        assert captured.out == ''

    def test_help_does_not_search(self, context, config, capsys):
        _, keep_running = dispatch('find -help', context, config)
        assert keep_running
        out = capsys.readouterr().out
        assert 'usage: find' in out
        assert 'a.txt' not in out

    def test_bad_flags_keep_shell_running(self, context, config, capsys):
        new_context, keep_running = dispatch('find -l nope', context, config)
        assert keep_running
        assert new_context == context
        assert capsys.readouterr().err.startswith('find:')

    def test_bad_regex_reported(self, context, config, capsys):
        dispatch('find -m (', context, config)
        captured = capsys.readouterr()
        assert 'Invalid regex pattern' in captured.err
        assert captured.out == ''

    def test_traversal_errors_reported(self, context, config, capsys):
        dispatch('find -d missing', context, config)
        assert 'Not a directory' in capsys.readouterr().err

    def test_root_permission_error_keeps_shell_running(self, context, config, capsys, monkeypatch):
        locked = context.cwd / 'locked_root'
        real_is_dir = pathlib.Path.is_dir

        def is_dir(self, *args, **kwargs):
            if self == locked:
                raise PermissionError(13, 'Permission denied', str(self))
            return real_is_dir(self, *args, **kwargs)

        monkeypatch.setattr(pathlib.Path, 'is_dir', is_dir)

        new_context, keep_running = dispatch('find -d locked_root -d sub', context, config)
        assert keep_running
        assert new_context == context
        captured = capsys.readouterr()
        assert 'Permission denied' in captured.err
        assert captured.out.splitlines() == [str(context.cwd / 'sub' / 'b.txt')]

    @pytest.fixture
    def undecodable(self, tree):
        """A directory whose name is not valid UTF-8."""
        directory = os.path.join(os.fsencode(tree), b'bad\xffname')
        try:
            os.mkdir(directory)
        except (OSError, UnicodeError):
            pytest.skip('filesystem rejects undecodable names')
        with open(os.path.join(directory, b'x.txt'), 'w') as f:
            f.write('x')
        return directory

    def test_undecodable_name_to_output_file(self, context, config, undecodable):
        _, keep_running = dispatch(r'find -m x\.txt$ -o results.log', context, config)
        assert keep_running
        content = (context.cwd / 'results.log').read_bytes()
        assert content == os.path.join(undecodable, b'x.txt') + b'\n'

    def test_undecodable_name_to_stdout(self, context, config, capsys, undecodable):
        _, keep_running = dispatch(r'find -m x\.txt$', context, config)
        assert keep_running
        out = capsys.readouterr().out
        assert 'x.txt' in out
        assert 'bad\\udcffname' in out

    def test_verbose_trace(self, context, config, capsys):
        dispatch('find -v', context, config)
        err = capsys.readouterr().err
        assert '[SEARCH] Starting search with criteria' in err
        assert '[SEARCH] Found 2 matching entries' in err


class TestDispatch:
    def test_unknown_command(self, context, config, capsys):
        new_context, keep_running = dispatch('frobnicate now', context, config)
        assert keep_running
        assert new_context == context
        assert "Unknown command 'frobnicate'" in capsys.readouterr().err

    def test_blank_line(self, context, config, capsys):
        assert dispatch('   ', context, config) == (context, True)
        assert capsys.readouterr().out == ''

    def test_help(self, context, config, capsys):
        dispatch('help', context, config)
        out = capsys.readouterr().out
        for verb in ('find', 'cd', 'ls', 'show', 'hide', 'exit'):
            assert verb in out

    def test_exit(self, context, config, capsys):
        _, keep_running = dispatch('exit', context, config)
        assert not keep_running
        assert 'Goodbye' in capsys.readouterr().out


class TestFinderShell:
    def test_run_until_exit(self, tree, config, capsys):
        lines = iter(['cd sub', 'ls', 'exit', 'ls'])
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return next(lines)

        shell = FinderShell(config, cwd=tree, input_func=fake_input)
        assert shell.run() == 0
        assert shell.context.cwd == tree.resolve() / 'sub'
        assert prompts[0] == f'{tree.resolve()}> '
        assert len(prompts) == 3
        assert 'b.txt' in capsys.readouterr().out

    def test_end_of_input_exits(self, tree, config, capsys):
        def no_input(prompt):
            raise EOFError

        assert FinderShell(config, cwd=tree, input_func=no_input).run() == 0
        assert 'Goodbye' in capsys.readouterr().out

    def test_hidden_default_from_config(self, tree, config):
        config.set('show_hidden', True)
        assert FinderShell(config, cwd=tree).context.show_hidden is True
