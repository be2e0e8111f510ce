from __future__ import annotations
"""M3U / M3U8 parser.

Recovers the ordered list of path lines from a (possibly extended) M3U file
together with the caption carried by a preceding ``#EXTINF`` line.

Encoding: ``.m3u8`` files default to UTF-8 and plain ``.m3u`` files to
ISO-8859-1. Either can be overridden from inside the file with an
``#EXTENC:<name>`` directive, which applies to every line after it. Lines
are decoded one at a time, so entries emitted before the directive keep the
text they were decoded with.

Bytes that do not decode in the active encoding are replaced rather than
raising; a single bad line never aborts the parse.
"""
import codecs
import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterable, List, Optional, Union

from ..models import PlaylistEntry
from ..utils.paths import ends_with, starts_with

logger = logging.getLogger(__name__)

DEFAULT_M3U_ENCODING = "ISO-8859-1"
DEFAULT_M3U8_ENCODING = "UTF-8"

EXTENC_TAG = "#EXTENC:"
EXTINF_TAG = "#EXTINF:"
_UTF8_BOM = codecs.BOM_UTF8


@dataclass(frozen=True)
class NoPendingCaption:
    """No #EXTINF caption waits for a path line."""


@dataclass(frozen=True)
class PendingCaption:
    """Caption from an #EXTINF line, consumed by the next path line."""
    text: str


CaptionState = Union[NoPendingCaption, PendingCaption]


def default_m3u_encoding(
    name: str,
    m3u_encoding: str = DEFAULT_M3U_ENCODING,
    m3u8_encoding: str = DEFAULT_M3U8_ENCODING,
) -> str:
    """Initial encoding for a playlist file, chosen by its extension."""
    return m3u8_encoding if ends_with(name, ".m3u8", ignore_case=True) else m3u_encoding


def _extract_field(line: str, tag: str) -> Optional[str]:
    """Return the trimmed value of an extended-M3U directive, or None.

    An empty value is reported as None: a bare ``#EXTINF:`` carries nothing.
    """
    if not starts_with(line, tag):
        return None
    value = line[len(tag):].strip()
    return value or None


def _caption_state_from_extinf(value: str) -> CaptionState:
    # "length,caption"; a missing comma means there is no caption
    _, sep, caption = value.partition(",")
    if not sep:
        return NoPendingCaption()
    return PendingCaption(caption.strip())


class M3uParser:
    """Incremental M3U parser; feed raw lines, then read ``entries``.

    Args:
        encoding: Encoding to decode lines with until an #EXTENC directive
    """

    def __init__(self, encoding: str = DEFAULT_M3U8_ENCODING):
        self.encoding = encoding
        self.caption_state: CaptionState = NoPendingCaption()
        self.entries: List[PlaylistEntry] = []
        self._first_line = True

    def _decode(self, raw: bytes) -> str:
        if self._first_line:
            self._first_line = False
            if raw.startswith(_UTF8_BOM):
                raw = raw[len(_UTF8_BOM):]
        return raw.decode(self.encoding, errors="replace")

    def _set_encoding(self, name: str) -> None:
        try:
            codecs.lookup(name)
        except LookupError:
            logger.warning(f"Unknown playlist encoding '{name}' in #EXTENC, keeping {self.encoding}")
            return
        self.encoding = name

    def _take_caption(self) -> Optional[str]:
        state = self.caption_state
        self.caption_state = NoPendingCaption()
        if isinstance(state, PendingCaption):
            return state.text
        return None

    def feed_line(self, raw: bytes) -> None:
        """Process one raw line (terminator optional)."""
        if raw.endswith(b"\n"):
            raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        line = self._decode(raw).strip()

        if not line:
            return

        if line.startswith("#"):
            # comment or extended format attribute line
            encoding = _extract_field(line, EXTENC_TAG)
            if encoding is not None:
                self._set_encoding(encoding)
                return
            info = _extract_field(line, EXTINF_TAG)
            if info is not None:
                self.caption_state = _caption_state_from_extinf(info)
            return

        self.entries.append(PlaylistEntry(path=line, caption=self._take_caption()))

    def feed(self, lines: Iterable[bytes]) -> List[PlaylistEntry]:
        for raw in lines:
            self.feed_line(raw)
        return self.entries


def parse_m3u(stream: BinaryIO | Iterable[bytes], encoding: str = DEFAULT_M3U8_ENCODING) -> List[PlaylistEntry]:
    """Return ordered entries from an M3U byte stream.

    Args:
        stream: Binary stream (or any iterable of byte lines)
        encoding: Initial encoding, see :func:`default_m3u_encoding`

    Returns:
        Entries in file order; captions are None for plain M3U files.
    """
    entries = M3uParser(encoding).feed(stream)
    logger.debug(f"[parsed] m3u entries={len(entries)} encoding={encoding}")
    return entries


__all__ = [
    "M3uParser",
    "NoPendingCaption",
    "PendingCaption",
    "parse_m3u",
    "default_m3u_encoding",
    "DEFAULT_M3U_ENCODING",
    "DEFAULT_M3U8_ENCODING",
]
