from __future__ import annotations
"""PLS parser.

A PLS file is an INI-like list::

    [playlist]
    File1=rock/a.mp3
    Title1=Song A
    File2=b.mp3
    NumberOfEntries=2
    Version=2

Only ``File#`` and ``Title#`` keys matter. They are paired by the text after
the prefix, which is kept as an opaque string: entries come out in the order
their ``File#`` key first appeared, never re-sorted numerically.
"""
import codecs
import logging
from typing import Dict, List

from ..errors import UnsupportedFormatError
from ..models import PlaylistEntry
from ..utils.paths import starts_with

logger = logging.getLogger(__name__)

HEADER = "[playlist]"
DEFAULT_FALLBACK_ENCODING = "ISO-8859-1"

_FILE_KEY = "File"
_TITLE_KEY = "Title"


def decode_pls_content(data: bytes, fallback_encoding: str = DEFAULT_FALLBACK_ENCODING) -> str:
    """Decode the whole file as UTF-8, or as the fallback encoding if not valid UTF-8."""
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug(f"PLS content is not valid UTF-8, decoding as {fallback_encoding}")
        return data.decode(fallback_encoding, errors="replace")


def parse_pls(data: bytes, fallback_encoding: str = DEFAULT_FALLBACK_ENCODING) -> List[PlaylistEntry]:
    """Return ordered entries from PLS file content.

    Args:
        data: Raw file content
        fallback_encoding: Encoding used when the content is not valid UTF-8

    Returns:
        One entry per distinct ``File#`` index, captioned from ``Title#``.

    Raises:
        UnsupportedFormatError: If the first non-blank line is not '[playlist]'
    """
    lines = decode_pls_content(data, fallback_encoding).split("\n")

    # the first non-blank line must be the header
    body_start = None
    for idx, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue
        if line != HEADER:
            raise UnsupportedFormatError("the file is not in valid PLS format")
        body_start = idx + 1
        break
    if body_start is None:
        raise UnsupportedFormatError("the file is not in valid PLS format")

    files: Dict[str, str] = {}
    titles: Dict[str, str] = {}
    for raw in lines[body_start:]:
        line = raw.strip()
        # ignore empty and malformed lines
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if starts_with(key, _FILE_KEY):
            files[key[len(_FILE_KEY):]] = value
        elif starts_with(key, _TITLE_KEY):
            titles[key[len(_TITLE_KEY):]] = value

    entries = [PlaylistEntry(path=path, caption=titles.get(idx)) for idx, path in files.items()]
    logger.debug(f"[parsed] pls entries={len(entries)} titles={len(titles)}")
    return entries


__all__ = ["parse_pls", "decode_pls_content", "HEADER", "DEFAULT_FALLBACK_ENCODING"]
