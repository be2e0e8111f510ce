from .interface import LibraryInterface
from .models import EntityId, PlaylistRow, TrackRow

__all__ = [
    "LibraryInterface",
    "EntityId",
    "PlaylistRow",
    "TrackRow",
]
