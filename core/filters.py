# core/filters.py

"""Per-entry search filters."""
from abc import ABC, abstractmethod
from typing import Iterable, List

from core.data_structures import DirectoryEntry, EntryKind, PermissionMatch, SearchRequest
from utils.file_utils import format_permissions, format_size

class SearchFilter(ABC):
    """Abstract base class for search filters"""

    @abstractmethod
    def matches(self, entry: DirectoryEntry) -> bool:
        """Check if entry passes this filter"""

    @abstractmethod
    def get_description(self) -> str:
        """Get human-readable description of filter"""


class KindFilter(SearchFilter):
    """Files only, unless directories and other entries were requested."""

    def __init__(self, include_directories: bool = False):
        self._include_directories = include_directories

    def matches(self, entry: DirectoryEntry) -> bool:
        return self._include_directories or entry.kind == EntryKind.FILE

    def get_description(self) -> str:
        return "All entry kinds" if self._include_directories else "Files only"


class SizeFilter(SearchFilter):
    """Minimum size; directories always pass."""

    def __init__(self, min_size: int):
        self._min_size = min_size

    def matches(self, entry: DirectoryEntry) -> bool:
        if entry.kind == EntryKind.DIRECTORY:
            return True
        return entry.size >= self._min_size

    def get_description(self) -> str:
        return f"size >= {format_size(self._min_size)}"


class ExtensionFilter(SearchFilter):
    """Filter by file extension"""

    def __init__(self, extension: str):
        # Normalize extension (remove dot, lowercase)
        self._extension = extension.lower().lstrip('.')

    def matches(self, entry: DirectoryEntry) -> bool:
        if entry.kind != EntryKind.FILE:
            return False
        return entry.path.suffix.lower().lstrip('.') == self._extension

    def get_description(self) -> str:
        return f"Extension = {self._extension}"


class PermissionFilter(SearchFilter):
    """Compare the entry's 0o777 bits with a mask."""

    def __init__(self, mask: int, mode: PermissionMatch = PermissionMatch.EXACT):
        self._mask = mask & 0o777
        self._mode = mode

    def matches(self, entry: DirectoryEntry) -> bool:
        bits = entry.permissions & 0o777
        if self._mode == PermissionMatch.AT_LEAST:
            return bits & self._mask == self._mask
        return bits == self._mask

    def get_description(self) -> str:
        return f"Permissions {self._mode.value} {format_permissions(self._mask)}"


class CharacterFilter(SearchFilter):
    """Name must contain a given character."""

    def __init__(self, character: str):
        self._character = character

    def matches(self, entry: DirectoryEntry) -> bool:
        return self._character in entry.name

    def get_description(self) -> str:
        return f"Name contains '{self._character}'"


def build_filters(request: SearchRequest) -> List[SearchFilter]:
    """Active filters for a request, cheapest first."""
    filters: List[SearchFilter] = [KindFilter(request.include_directories)]
    if request.min_size is not None:
        filters.append(SizeFilter(request.min_size))
    if request.file_type:
        filters.append(ExtensionFilter(request.file_type))
    if request.special_character:
        filters.append(CharacterFilter(request.special_character))
    if request.permission_mask is not None:
        filters.append(PermissionFilter(request.permission_mask, request.permission_match))
    return filters

def passes_filters(entry: DirectoryEntry, filters: Iterable[SearchFilter]) -> bool:
    return all(f.matches(entry) for f in filters)
