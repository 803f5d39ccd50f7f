"""Core data structures for the finder shell."""
import re
from enum import Enum
from pathlib import Path
from typing import Optional, NamedTuple, Tuple

class EntryKind(Enum):
    """Kind of a directory entry, determined without following symlinks."""
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"

class PermissionMatch(Enum):
    """How an entry's permission bits are compared with the requested mask."""
    EXACT = "exact"
    AT_LEAST = "at_least"

class DirectoryEntry(NamedTuple):
    """Snapshot of a single entry, taken while its directory is read."""
    path: Path
    name: str
    kind: EntryKind
    size: int
    permissions: int

class SearchRequest(NamedTuple):
    """Holds the criteria for one recursive search."""
    roots: Tuple[Path, ...] = ()
    patterns: Tuple[re.Pattern, ...] = ()
    min_size: Optional[int] = None
    include_directories: bool = False
    max_depth: Optional[int] = None
    permission_mask: Optional[int] = None
    permission_match: PermissionMatch = PermissionMatch.EXACT
    file_type: Optional[str] = None
    special_character: Optional[str] = None
    show_hidden: bool = False

class SearchError(NamedTuple):
    """A directory that could not be read; its subtree was skipped."""
    path: Path
    message: str

class SearchStats:
    """Counters accumulated over one search."""

    def __init__(self):
        self.directories = 0
        self.entries = 0
        self.matches = 0
        self.errors = 0

    def __repr__(self) -> str:
        return (f"SearchStats(directories={self.directories}, entries={self.entries}, "
                f"matches={self.matches}, errors={self.errors})")

class ShellContext(NamedTuple):
    """State owned by the command dispatcher and threaded through handlers."""
    cwd: Path
    show_hidden: bool = False
