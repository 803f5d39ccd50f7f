# core/shell.py

"""Interactive command loop: find, cd, ls, show/hide, help, exit."""
import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from tqdm import tqdm

from core.config import Config
from core.data_structures import SearchError, SearchRequest, SearchStats, ShellContext
from core.find_command import build_search_request, create_find_parser, describe_request, parse_find_args
from core.search_logic import search
from utils.file_utils import is_hidden_name
from utils.i18n import translator as t
from utils.platform_utils import NavigationError, is_absolute_path, to_native_path

HandlerResult = Tuple[ShellContext, bool]
Handler = Callable[[ShellContext, List[str], Config], HandlerResult]

def change_directory(context: ShellContext, target: str) -> Path:
    """Resolve the directory 'cd target' moves to, or raise NavigationError."""
    if target == '..':
        return context.cwd.parent
    if target == '.':
        return context.cwd

    if is_absolute_path(target):
        candidate = to_native_path(target)
    else:
        hidden = not context.show_hidden and is_hidden_name(target)
        # Only direct children are reachable by name
        if hidden or Path(target).name != target:
            raise NavigationError(t.get('cd_not_found', target))
        candidate = context.cwd / target

    if candidate.is_dir():
        return candidate.resolve() if is_absolute_path(target) else candidate
    if candidate.exists():
        raise NavigationError(t.get('cd_into_file', target))
    raise NavigationError(t.get('cd_not_found', target))

def list_directory(context: ShellContext) -> List[str]:
    """Sorted names of the entries in the current directory."""
    with os.scandir(context.cwd) as it:
        names = [entry.name for entry in it]
    if not context.show_hidden:
        names = [name for name in names if not is_hidden_name(name)]
    return sorted(names)

def write_path(stream: TextIO, path: Path):
    """Write one result line; undecodable names are escaped if the stream cannot take them."""
    line = f"{path}\n"
    try:
        stream.write(line)
    except UnicodeEncodeError:
        encoding = getattr(stream, 'encoding', None) or 'utf-8'
        stream.write(line.encode(encoding, 'backslashreplace').decode(encoding))

def run_search(request: SearchRequest, stream: TextIO, show_progress: bool = False,
               verbose: bool = False) -> SearchStats:
    """Write every match to stream, one path per line, reporting errors on stderr."""
    stats = SearchStats()
    if verbose:
        print(f"[SEARCH] Starting search with criteria: {describe_request(request)}", file=sys.stderr)

    with tqdm(desc=t.get('scanning'), unit='dir', file=sys.stderr,
              disable=not show_progress, leave=False) as progress:

        def on_error(error: SearchError):
            tqdm.write(t.get('search_error', error.path, error.message), file=sys.stderr)

        def on_directory(_path: Path):
            progress.update(1)

        for path in search(request, on_error, on_directory, stats):
            write_path(stream, path)

    if verbose:
        print(f"[SEARCH] Examined {stats.directories} directories, {stats.entries} total entries",
              file=sys.stderr)
        print(f"[SEARCH] Found {stats.matches} matching entries, {stats.errors} unreadable",
              file=sys.stderr)
    return stats

def handle_find(context: ShellContext, args: List[str], config: Config) -> HandlerResult:
    try:
        parsed = parse_find_args(args)
        if parsed.show_help:
            print(create_find_parser().format_help(), end='')
            return context, True
        request = build_search_request(parsed, context, config)
    except ValueError as e:
        print(t.get('find_error', e), file=sys.stderr)
        return context, True

    verbose = parsed.verbose or bool(config.get('verbose', False))
    if not parsed.output:
        run_search(request, sys.stdout, verbose=verbose)
        sys.stdout.flush()
        return context, True

    output_path = to_native_path(parsed.output)
    if not output_path.is_absolute():
        output_path = context.cwd / output_path
    try:
        out = open(output_path, config.get_output_mode(), encoding='utf-8',
                   errors='surrogateescape')
    except OSError as e:
        print(t.get('output_failed', output_path, e.strerror or e), file=sys.stderr)
        return context, True

    with out:
        stats = run_search(request, out, show_progress=bool(config.get('show_progress', True)),
                           verbose=verbose)
    print(t.get('results_written', stats.matches, output_path))
    return context, True

def handle_cd(context: ShellContext, args: List[str], config: Config) -> HandlerResult:
    if len(args) != 1:
        print(t.get('cd_usage'), file=sys.stderr)
        return context, True
    try:
        new_cwd = change_directory(context, args[0])
    except NavigationError as e:
        print(e, file=sys.stderr)
        return context, True
    except OSError as e:
        print(t.get('cd_failed', args[0], e.strerror or e), file=sys.stderr)
        return context, True
    return context._replace(cwd=new_cwd), True

def handle_ls(context: ShellContext, args: List[str], config: Config) -> HandlerResult:
    try:
        names = list_directory(context)
    except OSError as e:
        print(t.get('ls_failed', context.cwd, e.strerror or e), file=sys.stderr)
        return context, True
    for name in names:
        print(name)
    return context, True

def handle_show(context: ShellContext, args: List[str], config: Config) -> HandlerResult:
    print(t.get('hidden_shown'))
    return context._replace(show_hidden=True), True

def handle_hide(context: ShellContext, args: List[str], config: Config) -> HandlerResult:
    print(t.get('hidden_hidden'))
    return context._replace(show_hidden=False), True

def handle_help(context: ShellContext, args: List[str], config: Config) -> HandlerResult:
    print(t.get('help_text'))
    return context, True

def handle_exit(context: ShellContext, args: List[str], config: Config) -> HandlerResult:
    print(t.get('exit_message'))
    return context, False

COMMANDS: Dict[str, Handler] = {
    'find': handle_find,
    'cd': handle_cd,
    'ls': handle_ls,
    'show': handle_show,
    'hide': handle_hide,
    'help': handle_help,
    'exit': handle_exit,
}

def dispatch(line: str, context: ShellContext, config: Config) -> HandlerResult:
    """Run one command line; returns the new context and whether to keep going."""
    tokens = line.split()
    if not tokens:
        return context, True

    verb, args = tokens[0], tokens[1:]
    handler = COMMANDS.get(verb)
    if handler is None:
        print(t.get('unknown_command', verb), file=sys.stderr)
        return context, True
    return handler(context, args, config)


class FinderShell:
    """Reads commands until 'exit' or end of input."""

    def __init__(self, config: Config, cwd: Optional[Path] = None,
                 input_func: Callable[[str], str] = input):
        self.config = config
        self.context = ShellContext(
            cwd=(cwd or Path.cwd()).resolve(),
            show_hidden=bool(config.get('show_hidden', False)),
        )
        self.input_func = input_func

    def execute(self, line: str) -> bool:
        self.context, keep_running = dispatch(line, self.context, self.config)
        return keep_running

    def run(self) -> int:
        """Main loop; returns the process exit status."""
        while True:
            try:
                line = self.input_func(t.get('prompt', self.context.cwd))
            except EOFError:
                print()
                print(t.get('exit_message'))
                return 0
            if not self.execute(line):
                return 0
