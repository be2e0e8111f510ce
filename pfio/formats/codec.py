"""Playlist file codec: format dispatch, entry resolution and M3U8 encoding.

Decoding turns a playlist file into the files it references, looked up
through the filesystem capability. Entries that cannot be found are
collected, never raised. Encoding renders tracks as M3U8 text with paths
relative to the folder the playlist will be written to.
"""

from __future__ import annotations
import logging
from typing import List, Sequence

from ..config_types import FormatsConfig
from ..errors import NotFoundError, UnsupportedFormatError
from ..export.playlists import render_m3u8
from ..fs import FileSystemInterface, Node
from ..library.models import TrackRow
from ..models import EncodedPlaylist, ParseResult, PlaylistEntry, PlaylistFormat, ResolvedTrackRef
from ..utils.paths import parent_dir, relative_path, resolve_relative_path
from .m3u_parser import default_m3u_encoding, parse_m3u
from .pls_parser import parse_pls

logger = logging.getLogger(__name__)


class PlaylistFileCodec:
    """Reads M3U/M3U8 and PLS files, writes M3U8.

    Args:
        formats: Content types and encodings; defaults when omitted
    """

    def __init__(self, formats: FormatsConfig | None = None):
        self.formats = formats or FormatsConfig()

    def detect_format(self, content_type: str) -> PlaylistFormat:
        """Map a content type to a playlist format.

        Raises:
            UnsupportedFormatError: For any content type other than M3U or PLS
        """
        if content_type == self.formats.m3u_content_type:
            return PlaylistFormat.M3U
        if content_type == self.formats.pls_content_type:
            return PlaylistFormat.PLS
        raise UnsupportedFormatError(f"file mime type '{content_type}' is not supported")

    def read_entries(self, file: Node, base_folder: FileSystemInterface) -> List[PlaylistEntry]:
        """Parse a playlist file into its raw entries, without resolving them."""
        fmt = self.detect_format(base_folder.content_type(file))

        if fmt is PlaylistFormat.M3U:
            encoding = default_m3u_encoding(
                base_folder.absolute_path(file),
                m3u_encoding=self.formats.m3u_encoding,
                m3u8_encoding=self.formats.m3u8_encoding,
            )
            with base_folder.open_for_read(file) as stream:
                return parse_m3u(stream, encoding)

        return parse_pls(base_folder.get_content(file), self.formats.pls_fallback_encoding)

    def decode(self, file: Node, base_folder: FileSystemInterface) -> ParseResult:
        """Parse a playlist file and find the referenced files.

        Args:
            file: Playlist file node
            base_folder: Ancestor folder of the playlist and the track files

        Returns:
            ParseResult; paths not found below ``base_folder`` are listed in
            ``unresolved_paths`` in their resolved (root-relative) form.

        Raises:
            UnsupportedFormatError: On an unsupported content type or a bad PLS header
        """
        entries = self.read_entries(file, base_folder)

        result = ParseResult()
        cwd = base_folder.relative_path_from_root(parent_dir(base_folder.absolute_path(file)))

        for entry in entries:
            path = resolve_relative_path(cwd, entry.path)
            try:
                node = base_folder.resolve(path)
            except NotFoundError:
                result.unresolved_paths.append(path)
                continue
            if node.is_folder:
                result.unresolved_paths.append(path)
                continue
            result.resolved.append(ResolvedTrackRef(file=node, caption=entry.caption))

        logger.debug(
            f"[decoded] file='{file.path}' entries={len(entries)} "
            f"found={len(result.resolved)} missing={len(result.unresolved_paths)}"
        )
        return result

    def encode(
        self,
        playlist_name: str,
        tracks: Sequence[TrackRow],
        target_dir: str,
        base_folder: FileSystemInterface,
    ) -> EncodedPlaylist:
        """Render tracks as M3U8 text.

        Tracks whose file no longer exists (e.g. deleted since the last scan)
        are left out.

        Args:
            playlist_name: Name of the playlist (for logging)
            tracks: Playlist tracks in order
            target_dir: Absolute path of the folder the file will be written to
            base_folder: Filesystem used to locate track files by id

        Returns:
            EncodedPlaylist with the M3U8 text ('\\n' line endings) and the
            number of tracks written and skipped
        """
        items = []
        for track in tracks:
            nodes = base_folder.get_by_id(track.file_id)
            if not nodes:
                logger.debug(f"Skipping track {track.id}: file {track.file_id} not found")
                continue
            items.append((track, relative_path(target_dir, base_folder.absolute_path(nodes[0]))))

        logger.debug(
            f"[encoded] playlist='{playlist_name}' kept={len(items)} skipped={len(tracks) - len(items)}"
        )
        return EncodedPlaylist(
            text=render_m3u8(items),
            written_count=len(items),
            skipped_count=len(tracks) - len(items),
        )


__all__ = ["PlaylistFileCodec"]
