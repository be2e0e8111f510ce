from __future__ import annotations
"""M3U8 rendering helpers for playlist export.

Exported files are always UTF-8 and say so with an ``#EXTENC`` line, so they
read back identically whatever extension the target ends up with.
"""
from typing import Iterable, Optional
import logging

from ..library.models import TrackRow
from ..utils.paths import truncate

logger = logging.getLogger(__name__)

HEADER = "#EXTM3U"
ENCODING_HEADER = "#EXTENC: UTF-8"
EXTENSION = ".m3u8"

# Storage backends commonly cap names at 250 bytes including the extension.
# 5 bytes are kept for the extension and 5 for a " (xx)" collision suffix.
NAME_BUDGET = 250 - 5 - 5


def playlist_filename(
    name: str,
    name_budget: int = NAME_BUDGET,
    extension: str = EXTENSION,
) -> str:
    """File name for an exported playlist.

    '/' cannot appear in a file name, so it becomes '-'. The base name is cut
    to ``name_budget`` UTF-8 bytes.

    Example:
        >>> playlist_filename('AC/DC best')
        'AC-DC best.m3u8'
    """
    base = name.replace('/', '-')
    short = truncate(base, name_budget)
    if short != base:
        logger.debug(f"Playlist name '{name}' shortened to '{short}' for export")
    return short + extension


def caption_for_track(track: TrackRow) -> str:
    title = track.title or ''
    artist = track.artist
    return f"{artist} - {title}" if artist else title


def _length_seconds(length: Optional[float]) -> int:
    # -1 is the M3U convention for unknown duration
    if length is None:
        return -1
    try:
        return int(length)
    except (TypeError, ValueError):
        return -1


def extinf_line(track: TrackRow) -> str:
    return f"#EXTINF:{_length_seconds(track.length)},{caption_for_track(track)}"


def render_m3u8(items: Iterable[tuple[TrackRow, str]]) -> str:
    """Render (track, relative path) pairs as extended M3U text.

    Every line, the last included, ends with '\\n'.
    """
    lines = [HEADER, ENCODING_HEADER]
    for track, path in items:
        lines.append(extinf_line(track))
        lines.append(path)
    return '\n'.join(lines) + '\n'


__all__ = [
    "HEADER",
    "ENCODING_HEADER",
    "EXTENSION",
    "playlist_filename",
    "caption_for_track",
    "extinf_line",
    "render_m3u8",
]
