"""Import service: add the tracks listed in a playlist file to a playlist.

Entries are matched to library tracks through the files they point at.
Entries that cannot be matched are counted and reported in one warning, but
never stop the import.
"""

from __future__ import annotations
import json
import logging
import time
from typing import List

from ..errors import NotFoundError
from ..formats.codec import PlaylistFileCodec
from ..fs import FileSystemInterface, NodeId
from ..library import EntityId, LibraryInterface
from ..models import ImportOutcome, ParseResult
from ..utils.logging_helpers import format_summary

logger = logging.getLogger(__name__)


def parse_file(
    file_id: NodeId,
    base_folder: FileSystemInterface,
    codec: PlaylistFileCodec | None = None,
) -> ParseResult:
    """Parse a playlist file and return the contained files (preview).

    Args:
        file_id: Id of the playlist file
        base_folder: Ancestor folder of the playlist and the track files

    Raises:
        NotFoundError: If no file has this id below ``base_folder``
        UnsupportedFormatError: If the file is not M3U or PLS
    """
    nodes = base_folder.get_by_id(file_id)
    if not nodes:
        raise NotFoundError(f"file {file_id} not found")
    return (codec or PlaylistFileCodec()).decode(nodes[0], base_folder)


def import_from_file(
    library: LibraryInterface,
    playlist_id: EntityId,
    owner: str,
    base_folder: FileSystemInterface,
    file_path: str,
    codec: PlaylistFileCodec | None = None,
    log: logging.Logger | None = None,
) -> ImportOutcome:
    """Import playlist file contents into an existing playlist.

    Args:
        library: Playlist/track business layer
        playlist_id: Playlist to append to
        owner: Owner of the playlist
        base_folder: Home folder of the owner
        file_path: Playlist file, relative to ``base_folder``
        codec: Codec to parse with (default: a new PlaylistFileCodec)
        log: Receives the warning about unmatched entries (default: module logger)

    Returns:
        ImportOutcome with the updated playlist, matched and failed counts

    Raises:
        NotFoundError: If the playlist or the file does not exist
        UnsupportedFormatError: If the file is not M3U or PLS
    """
    log = log or logger
    codec = codec or PlaylistFileCodec()
    start = time.time()

    library.find_playlist(playlist_id, owner)

    file = base_folder.resolve(file_path)
    if file.is_folder:
        raise NotFoundError(f"'{file_path}' is not a file")

    parsed = codec.decode(file, base_folder)
    invalid_paths: List[str] = list(parsed.unresolved_paths)

    track_ids: List[EntityId] = []
    for ref in parsed.resolved:
        track = library.find_track_by_file_id(ref.file.id, owner)
        if track is not None:
            track_ids.append(track.id)
        else:
            invalid_paths.append(base_folder.absolute_path(ref.file))

    playlist = library.add_tracks(track_ids, playlist_id, owner)

    if invalid_paths:
        log.warning(
            "Some files were not found from the user's music library: "
            + json.dumps(invalid_paths, ensure_ascii=False)
        )

    outcome = ImportOutcome(
        playlist=playlist,
        imported_count=len(track_ids),
        failed_count=len(invalid_paths),
    )
    logger.info(
        format_summary(
            f"Import '{file_path}'",
            {'imported': outcome.imported_count, 'failed': outcome.failed_count},
            duration_seconds=time.time() - start,
        )
    )
    return outcome


__all__ = ["import_from_file", "parse_file"]
