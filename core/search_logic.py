# core/search_logic.py

"""Core recursive search logic."""
import os
import re
import stat
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence

from core.data_structures import (
    DirectoryEntry, EntryKind, SearchError, SearchRequest, SearchStats
)
from core.filters import build_filters, passes_filters
from utils.file_utils import filter_overlapping_paths, is_hidden_name
from utils.i18n import translator as t

ErrorCallback = Callable[[SearchError], None]
ProgressCallback = Callable[[Path], None]

def classify_mode(mode: int) -> EntryKind:
    """Map an lstat mode to an entry kind; symlinks are never directories."""
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER

def read_directory(path: Path) -> List[DirectoryEntry]:
    """Snapshot the immediate entries of a directory, sorted by name.

    Raises OSError if the directory cannot be opened or any entry cannot be
    stat'ed; the caller treats either as a failed read of the whole directory.
    """
    entries = []
    with os.scandir(path) as it:
        for dir_entry in it:
            stat_info = dir_entry.stat(follow_symlinks=False)
            kind = classify_mode(stat_info.st_mode)
            entries.append(DirectoryEntry(
                path=path / dir_entry.name,
                name=dir_entry.name,
                kind=kind,
                size=0 if kind == EntryKind.DIRECTORY else stat_info.st_size,
                permissions=stat.S_IMODE(stat_info.st_mode) & 0o777,
            ))
    entries.sort(key=lambda e: e.name)
    return entries

def matches_patterns(path: Path, patterns: Sequence[re.Pattern]) -> bool:
    """Any pattern found anywhere in the full path string; no patterns match all."""
    if not patterns:
        return True
    path_str = str(path)
    return any(p.search(path_str) for p in patterns)

def search(request: SearchRequest,
           error_callback: Optional[ErrorCallback] = None,
           progress_callback: Optional[ProgressCallback] = None,
           stats: Optional[SearchStats] = None) -> Iterator[Path]:
    """Lazily yield every path under the request's roots that passes its filters.

    Each root is walked depth-first; an entry is yielded before its own
    subtree is read. Unreadable directories are reported through
    error_callback and skipped, and the walk carries on with their siblings.
    """
    if stats is None:
        stats = SearchStats()
    filters = build_filters(request)
    roots = filter_overlapping_paths(list(request.roots)) if request.roots else [Path.cwd()]

    def report(path: Path, message: str):
        stats.errors += 1
        if error_callback:
            error_callback(SearchError(path, message))

    def open_directory(path: Path) -> Optional[Iterator[DirectoryEntry]]:
        try:
            entries = read_directory(path)
        except OSError as e:
            report(path, e.strerror or str(e))
            return None
        stats.directories += 1
        if progress_callback:
            progress_callback(path)
        return iter(entries)

    for root in roots:
        try:
            is_directory = root.is_dir()
        except OSError as e:
            report(root, e.strerror or str(e))
            continue
        if not is_directory:
            report(root, t.get('not_a_directory'))
            continue

        root_entries = open_directory(root)
        if root_entries is None:
            continue

        # Stack items: (entry iterator, depth of those entries)
        stack = [(root_entries, 0)]
        while stack:
            entries, depth = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            if not request.show_hidden and is_hidden_name(entry.name):
                continue
            stats.entries += 1

            if passes_filters(entry, filters) and matches_patterns(entry.path, request.patterns):
                stats.matches += 1
                yield entry.path

            if entry.kind == EntryKind.DIRECTORY and (
                    request.max_depth is None or depth < request.max_depth):
                children = open_directory(entry.path)
                if children is not None:
                    stack.append((children, depth + 1))
