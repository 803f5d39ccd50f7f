#!/usr/bin/env python3
"""
Finder Shell - Entry Point

An interactive shell for moving around a filesystem and recursively
searching directory trees with regular expressions, size, depth, type and
permission filters.
"""

import argparse
import sys
from pathlib import Path

from core.config import Config
from core.shell import FinderShell
from utils.i18n import translator as t


def main(argv=None) -> int:
    """Main entry point for the interactive shell."""
    parser = argparse.ArgumentParser(
        description="Interactive finder shell.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""
Run without arguments to start the interactive shell.

Examples:
  python main.py
    (Starts the shell in the current directory)

  python main.py --cwd ~/projects -c "find -m \\.py$ -s 1KB"
    (Runs one search and exits)
"""
    )
    parser.add_argument('--lang', choices=['en', 'de'], help='Set language for shell output')
    parser.add_argument('--cwd', type=Path, help='Initial working directory')
    parser.add_argument('--config', type=Path, help='Path to an alternate configuration file')
    parser.add_argument('-c', '--command', dest='commands', action='append', default=[],
                        help='Run this command and exit (repeatable)')

    args = parser.parse_args(argv)

    config = Config(args.config)
    t.set_language(args.lang or config.get('language') or t.current_lang)

    if args.cwd is not None and not args.cwd.is_dir():
        print(f"Error: '{args.cwd}' is not a valid directory.", file=sys.stderr)
        return 1

    shell = FinderShell(config, cwd=args.cwd)

    if args.commands:
        for command in args.commands:
            if not shell.execute(command):
                break
        return 0

    try:
        return shell.run()
    except KeyboardInterrupt:
        print("\n" + t.get('interrupted'))
        return 0

if __name__ == "__main__":
    sys.exit(main())
