"""Export service: write a playlist to an M3U8 file.

Handles playlist lookup, target folder resolution, file naming and the
name-collision policy, then delegates rendering to the codec.
"""

from __future__ import annotations
import logging
import time

from ..config_types import ExportConfig
from ..errors import NameConflictError, NotFoundError, PlaylistFileError
from ..export.playlists import playlist_filename
from ..formats.codec import PlaylistFileCodec
from ..fs import FileSystemInterface, Node
from ..library import EntityId, LibraryInterface
from ..models import ExportCollisionMode
from ..utils.logging_helpers import format_summary
from ..utils.paths import join_path

logger = logging.getLogger(__name__)


def _resolve_target_folder(base_folder: FileSystemInterface, folder_path: str) -> Node:
    """Resolve the export folder.

    Raises:
        NotFoundError: If the path does not exist or is not a folder
    """
    node = base_folder.resolve(folder_path)
    if not node.is_folder:
        raise NotFoundError(f"'{folder_path}' is not a folder")
    return node


def _apply_collision_mode(
    base_folder: FileSystemInterface,
    folder_path: str,
    filename: str,
    mode: ExportCollisionMode,
) -> str:
    """Return the file name to write, deleting or renaming per ``mode``.

    Raises:
        NameConflictError: If the file exists and mode is ABORT
    """
    target = join_path(folder_path, filename)
    if not base_folder.exists(target):
        return filename

    if mode is ExportCollisionMode.OVERWRITE:
        logger.debug(f"Overwriting existing playlist file {target}")
        base_folder.delete(base_folder.resolve(target))
        return filename
    if mode is ExportCollisionMode.KEEP_BOTH:
        unique = base_folder.non_colliding_name(folder_path, filename)
        logger.debug(f"Playlist file {target} exists, writing {unique} instead")
        return unique
    raise NameConflictError(f"file already exists: {target}")


def _write_or_remove(base_folder: FileSystemInterface, file: Node, data: bytes) -> None:
    """Write ``data`` to a freshly created file, deleting the file if the write fails.

    The write error propagates unchanged.
    """
    try:
        base_folder.put_content(file, data)
    except Exception:
        try:
            base_folder.delete(file)
        except PlaylistFileError as cleanup_error:
            logger.warning(f"Could not remove partial export {file.path}: {cleanup_error}")
        raise


def export_to_file(
    library: LibraryInterface,
    playlist_id: EntityId,
    owner: str,
    base_folder: FileSystemInterface,
    target_folder_path: str,
    collision_mode: ExportCollisionMode | str | None = None,
    export_config: ExportConfig | None = None,
    codec: PlaylistFileCodec | None = None,
) -> str:
    """Export a playlist to an M3U8 file.

    Args:
        library: Playlist/track business layer
        playlist_id: Playlist to export
        owner: Owner of the playlist
        base_folder: Home folder of the owner
        target_folder_path: Target folder, relative to ``base_folder``
        collision_mode: 'overwrite', 'keepboth' or 'abort'; defaults to the
            configured mode
        export_config: Naming limits and default collision mode
        codec: Codec to render with (default: a new PlaylistFileCodec)

    Returns:
        Path of the written file, relative to ``base_folder``

    Raises:
        NotFoundError: If the playlist or target folder does not exist
        NameConflictError: On a name collision when mode is 'abort'
        PermissionDeniedError: If the folder is not writable
        ValueError: On an unknown collision mode
    """
    export_config = export_config or ExportConfig()
    mode = ExportCollisionMode.parse(collision_mode if collision_mode is not None else export_config.collision_mode)
    codec = codec or PlaylistFileCodec()
    start = time.time()

    playlist = library.find_playlist(playlist_id, owner)
    tracks = library.get_playlist_tracks(playlist_id, owner)
    target_folder = _resolve_target_folder(base_folder, target_folder_path)
    folder_path = base_folder.relative_path_from_root(base_folder.absolute_path(target_folder))

    # must run before the collision policy, which may delete the existing file
    encoded = codec.encode(playlist.name, tracks, base_folder.absolute_path(target_folder), base_folder)

    filename = playlist_filename(
        playlist.name,
        name_budget=export_config.name_budget,
        extension=export_config.extension,
    )
    filename = _apply_collision_mode(base_folder, folder_path, filename, mode)

    file = base_folder.new_file(join_path(folder_path, filename))
    _write_or_remove(base_folder, file, encoded.text.encode('utf-8'))

    written = base_folder.relative_path_from_root(base_folder.absolute_path(file))
    logger.info(
        format_summary(
            f"Export '{playlist.name}'",
            {'exported': encoded.written_count, 'skipped': encoded.skipped_count},
            duration_seconds=time.time() - start,
        )
        + f" -> {written}"
    )
    return written


__all__ = ["export_to_file"]
