"""Domain model types for the business-layer entities read by the services.

These dataclasses are the read-side contract with the hosting application's
playlist and track storage; they carry only what import/export needs.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, List, Union

EntityId = Union[int, str]


@dataclass
class TrackRow:
    """A track of the user's music library, backed by one audio file."""
    id: EntityId
    title: Optional[str]
    artist: Optional[str]
    length: Optional[float]
    file_id: EntityId
    owner: Optional[str] = None


@dataclass
class PlaylistRow:
    """A user playlist: a name plus an ordered list of track ids."""
    id: EntityId
    name: str
    owner: Optional[str] = None
    track_ids: List[EntityId] = field(default_factory=list)


__all__ = ["TrackRow", "PlaylistRow", "EntityId"]
