"""Playlist file formats: M3U/M3U8 and PLS readers plus the codec.

Public API:
    PlaylistFileCodec: content-type dispatch, resolution and M3U8 encoding
    parse_m3u / parse_pls: byte-level parsers producing PlaylistEntry lists
"""

from .codec import PlaylistFileCodec
from .m3u_parser import M3uParser, parse_m3u, default_m3u_encoding
from .pls_parser import parse_pls

__all__ = [
    "PlaylistFileCodec",
    "M3uParser",
    "parse_m3u",
    "parse_pls",
    "default_m3u_encoding",
]
