from __future__ import annotations
"""Business-layer interface abstraction for testability.

This interface defines the contract used by the import/export services. The
hosting application provides an implementation backed by its own playlist
and track storage; unit tests use an in-memory mock.

Only methods required by the services are included; extend incrementally
when new read/write paths are exercised.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .models import EntityId, PlaylistRow, TrackRow


class LibraryInterface(ABC):
    # --- Playlists ---
    @abstractmethod
    def find_playlist(self, playlist_id: EntityId, owner: str) -> PlaylistRow:
        """Get a playlist owned by ``owner``.

        Raises:
            NotFoundError: If the playlist does not exist for this owner
        """
        ...

    @abstractmethod
    def get_playlist_tracks(self, playlist_id: EntityId, owner: str) -> List[TrackRow]:
        """Get the tracks of a playlist in playlist order."""
        ...

    @abstractmethod
    def add_tracks(self, track_ids: Sequence[EntityId], playlist_id: EntityId, owner: str) -> PlaylistRow:
        """Append tracks to a playlist and return the updated playlist.

        Implementations must tolerate ids already present in the playlist
        and must not add them a second time.

        Raises:
            NotFoundError: If the playlist does not exist for this owner
        """
        ...

    # --- Tracks ---
    @abstractmethod
    def find_track_by_file_id(self, file_id: EntityId, owner: str) -> Optional[TrackRow]: ...


__all__ = ["LibraryInterface"]
