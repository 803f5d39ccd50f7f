# core/find_command.py

"""Translation of 'find' command flags into a SearchRequest."""
import argparse
import re
from typing import List

from core.config import Config
from core.data_structures import PermissionMatch, SearchRequest, ShellContext
from core.filters import build_filters
from utils.file_utils import parse_permissions, parse_size
from utils.i18n import translator as t
from utils.platform_utils import to_native_path

class FindArgumentError(ValueError):
    """Malformed 'find' flags; the shell reports it and keeps running."""
    pass

class FindArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting the process."""

    def error(self, message):
        raise FindArgumentError(message)

def _size_arg(value: str) -> int:
    try:
        return parse_size(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

def _depth_arg(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        depth = -1
    if depth < 0:
        raise argparse.ArgumentTypeError(t.get('invalid_depth', value))
    return depth

def _perms_arg(value: str) -> int:
    try:
        return parse_permissions(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

def _char_arg(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(t.get('invalid_char', value))
    return value

def create_find_parser() -> FindArgumentParser:
    """Build the 'find' parser; help texts follow the current language."""
    parser = FindArgumentParser(
        prog='find',
        description=t.get('find_description'),
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument('-d', '--dir', dest='directories', action='append', default=[],
                        metavar='DIR', help=t.get('find_dir_help'))
    parser.add_argument('-m', '--match', dest='patterns', action='append', default=[],
                        metavar='PATTERN', help=t.get('find_match_help'))
    parser.add_argument('-o', '--output', metavar='FILE', help=t.get('find_output_help'))
    parser.add_argument('-s', '--size', dest='min_size', type=_size_arg, metavar='SIZE',
                        help=t.get('find_size_help'))
    parser.add_argument('-a', '--all', dest='include_directories', action='store_true',
                        help=t.get('find_all_help'))
    parser.add_argument('-l', '--level', dest='max_depth', type=_depth_arg, metavar='DEPTH',
                        help=t.get('find_level_help'))
    parser.add_argument('-t', '--type', dest='file_type', metavar='TYPE',
                        help=t.get('find_type_help'))
    parser.add_argument('-p', '--perms', dest='permissions', type=_perms_arg, metavar='PERMS',
                        help=t.get('find_perms_help'))
    parser.add_argument('--perm-mode', choices=['exact', 'at-least'],
                        help=t.get('find_perm_mode_help'))
    parser.add_argument('-c', '--char', dest='special_character', type=_char_arg, metavar='CHAR',
                        help=t.get('find_char_help'))
    parser.add_argument('-i', '--ignore-case', action='store_true',
                        help=t.get('find_ignore_case_help'))
    parser.add_argument('-v', '--verbose', action='store_true', help=t.get('find_verbose_help'))
    parser.add_argument('-h', '-help', '--help', dest='show_help', action='store_true',
                        help=t.get('find_help_help'))
    return parser

def parse_find_args(tokens: List[str]) -> argparse.Namespace:
    return create_find_parser().parse_args(tokens)

def build_search_request(args: argparse.Namespace, context: ShellContext,
                         config: Config) -> SearchRequest:
    """Validate parsed flags and resolve them against the shell context.

    Patterns are compiled here so a malformed regex is rejected before any
    directory is read.
    """
    roots = []
    for directory in args.directories:
        path = to_native_path(directory)
        roots.append(path if path.is_absolute() else context.cwd / path)
    if not roots:
        roots.append(context.cwd)

    flags = re.IGNORECASE if args.ignore_case else 0
    patterns = []
    for pattern in args.patterns:
        try:
            patterns.append(re.compile(pattern, flags))
        except re.error as e:
            raise ValueError(t.get('invalid_regex', e))

    if args.perm_mode:
        permission_match = PermissionMatch(args.perm_mode.replace('-', '_'))
    else:
        permission_match = config.get_permission_match()

    return SearchRequest(
        roots=tuple(roots),
        patterns=tuple(patterns),
        min_size=args.min_size,
        include_directories=args.include_directories,
        max_depth=args.max_depth,
        permission_mask=args.permissions,
        permission_match=permission_match,
        file_type=args.file_type,
        special_character=args.special_character,
        show_hidden=context.show_hidden,
    )

def describe_request(request: SearchRequest) -> str:
    """One-line summary of a request for the verbose trace."""
    parts = [
        f"roots={[str(r) for r in request.roots]}",
        f"patterns={[p.pattern for p in request.patterns] or ['<all>']}",
        f"max_depth={request.max_depth}",
        f"show_hidden={request.show_hidden}",
    ]
    parts.append(f"filters=[{'; '.join(f.get_description() for f in build_filters(request))}]")
    return ', '.join(parts)
