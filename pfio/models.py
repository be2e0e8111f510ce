"""Transient value types passed between parsers, codec and services.

None of these are persisted; they live for the duration of a single import,
export or preview call.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .fs.interface import Node


class PlaylistFormat(Enum):
    """Playlist file formats that can be read."""
    M3U = "m3u"
    PLS = "pls"


class ExportCollisionMode(str, Enum):
    """Action to take when the export target file already exists."""
    OVERWRITE = "overwrite"
    KEEP_BOTH = "keepboth"
    ABORT = "abort"

    @classmethod
    def parse(cls, value: ExportCollisionMode | str) -> ExportCollisionMode:
        """Accept an enum member or its string value.

        Strings are matched after trimming and lower-casing, so values typed
        into .env files or environment variables ('KeepBoth', ' abort ') work.
        No other spellings are accepted.

        Raises:
            ValueError: If the value is not one of 'overwrite', 'keepboth', 'abort'
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Invalid collision mode '{value}' (expected one of: {allowed})") from None


@dataclass(frozen=True)
class PlaylistEntry:
    """One path line of a playlist file, exactly as written."""
    path: str
    caption: Optional[str] = None


@dataclass(frozen=True)
class ResolvedTrackRef:
    """A playlist entry that was found in the filesystem."""
    file: Node
    caption: Optional[str] = None


@dataclass
class ParseResult:
    """Files found for a parsed playlist plus the paths that could not be found."""
    resolved: List[ResolvedTrackRef] = field(default_factory=list)
    unresolved_paths: List[str] = field(default_factory=list)

    @property
    def entry_count(self) -> int:
        return len(self.resolved) + len(self.unresolved_paths)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable preview form ('files' and 'invalid_paths')."""
        return {
            "files": [
                {"id": ref.file.id, "path": ref.file.path, "caption": ref.caption}
                for ref in self.resolved
            ],
            "invalid_paths": list(self.unresolved_paths),
        }


@dataclass(frozen=True)
class EncodedPlaylist:
    """M3U8 text for an export plus how many tracks made it in."""
    text: str
    written_count: int = 0
    skipped_count: int = 0


@dataclass
class ImportOutcome:
    """Result of importing a playlist file into an existing playlist."""
    playlist: Any
    imported_count: int = 0
    failed_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "playlist": self.playlist,
            "imported_count": self.imported_count,
            "failed_count": self.failed_count,
        }


__all__ = [
    "PlaylistFormat",
    "ExportCollisionMode",
    "PlaylistEntry",
    "ResolvedTrackRef",
    "ParseResult",
    "EncodedPlaylist",
    "ImportOutcome",
]
