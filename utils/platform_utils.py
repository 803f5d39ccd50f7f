# utils/platform_utils.py

"""Platform-specific utilities."""
import platform
import re
from pathlib import Path, PureWindowsPath

_DRIVE_PREFIX = re.compile(r'^[A-Za-z]:[\\/]')

class FileOperationError(Exception):
    """Custom exception for file operation errors."""
    pass

class NavigationError(FileOperationError):
    """Raised when the shell cannot move to the requested directory."""
    pass

def is_windows() -> bool:
    return platform.system() == 'Windows'

def is_absolute_path(path_str: str) -> bool:
    """True for POSIX absolute paths and Windows drive paths such as C:\\."""
    if _DRIVE_PREFIX.match(path_str):
        return True
    return Path(path_str).is_absolute()

def to_native_path(path_str: str) -> Path:
    """Builds a concrete path, normalizing Windows drive paths on Windows."""
    if is_windows() and _DRIVE_PREFIX.match(path_str):
        return Path(PureWindowsPath(path_str))
    return Path(path_str)
