# utils/file_utils.py

"""File operation utilities."""
import re
import stat
from pathlib import Path
from typing import List

from utils.i18n import translator as t

HIDDEN_MARKER = '.'

_SYMBOLIC_PERMS = re.compile(r'^[r-][w-][xsS-][r-][w-][xsS-][r-][w-][xtT-]$')

def format_size(size_bytes: int) -> str:
    """Formats bytes into a human-readable string (KB, MB, GB)."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    size = float(size_bytes)
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} PB"

def parse_size(size_str: str) -> int:
    """Parse size string like '100', '5MB', '2.5GB' to bytes."""
    if not size_str or size_str.lower() == 'any':
        return 0

    size_str = size_str.strip().upper()
    match = re.match(r'^(\d+(?:\.\d+)?)\s*([KMGT]?B?)$', size_str)
    if not match:
        raise ValueError(t.get('invalid_size', size_str))

    number = float(match.group(1))
    unit = match.group(2) or 'B'

    if len(unit) == 1 and unit in "KMGT":
        unit += 'B'

    multipliers = {'B': 1, 'KB': 1024, 'MB': 1024**2, 'GB': 1024**3, 'TB': 1024**4}
    return int(number * multipliers.get(unit, 1))

def parse_permissions(descriptor: str) -> int:
    """Parse '755', '0o644' or 'rwxr-xr-x' into permission bits.

    Setuid, setgid and sticky markers in the symbolic form are read as the
    underlying execute bit only; the filter compares the 0o777 bits.
    """
    text = descriptor.strip()
    octal = text[2:] if text.lower().startswith('0o') else text
    if re.match(r'^[0-7]{1,4}$', octal):
        return int(octal, 8) & 0o777

    if _SYMBOLIC_PERMS.match(text):
        bits = 0
        for char, flag in zip(text, (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR,
                                     stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP,
                                     stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH)):
            if char in 'rwxst':
                bits |= flag
        return bits

    raise ValueError(t.get('invalid_perms', descriptor))

def format_permissions(bits: int) -> str:
    """Render permission bits as 'rwxr-xr-x'."""
    return stat.filemode(stat.S_IFREG | (bits & 0o777))[1:]

def is_hidden_name(name: str) -> bool:
    """Entries whose name starts with the hidden marker are hidden."""
    return name.startswith(HIDDEN_MARKER)

def is_subdirectory(child: Path, parent: Path) -> bool:
    """Checks if one path is a subdirectory of another."""
    try:
        child.resolve().relative_to(parent.resolve())
        return True
    except (ValueError, OSError):
        return False

def filter_overlapping_paths(paths: List[Path]) -> List[Path]:
    """Removes repeated paths and paths nested inside others, keeping order."""
    unique_paths = []
    for i, path in enumerate(paths):
        if any(is_subdirectory(path, kept) for kept in unique_paths):
            continue
        later = paths[i + 1:]
        if any(is_subdirectory(path, other) and not is_subdirectory(other, path) for other in later):
            continue
        unique_paths.append(path)
    return unique_paths
