"""Path arithmetic for playlist files.

Pure string functions over '/'-separated storage paths: nothing here touches
a filesystem, so targets do not need to exist.
"""

from __future__ import annotations
import string

_SEP = "/"
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _normalize(path: str) -> str:
    """Collapse '.', '..' and repeated separators.

    '..' above an absolute root stays at the root; leading '..' of a relative
    path is kept.
    """
    absolute = path.startswith(_SEP)
    parts: list[str] = []
    for segment in path.split(_SEP):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not absolute:
                parts.append(segment)
            continue
        parts.append(segment)
    joined = _SEP.join(parts)
    if absolute:
        return _SEP + joined
    return joined or "."


def resolve_relative_path(base_dir: str, ref: str) -> str:
    """Resolve a playlist entry path against the folder holding the playlist.

    Args:
        base_dir: Folder of the playlist file (root-relative, e.g. '/music/lists')
        ref: Path as written in the playlist (relative or starting with '/')

    Returns:
        Normalized path; ``ref`` itself (normalized) when empty or absolute

    Example:
        >>> resolve_relative_path('/music/lists', '../rock/a.mp3')
        '/music/rock/a.mp3'
    """
    if not ref:
        return ref
    if ref.startswith(_SEP):
        return _normalize(ref)
    return _normalize(f"{base_dir}{_SEP}{ref}")


def relative_path(from_dir: str, to_path: str) -> str:
    """Shortest relative path from an absolute folder to an absolute path.

    Example:
        >>> relative_path('/u/music/rock', '/u/other/a.mp3')
        '../other/a.mp3'
    """
    from_parts = [p for p in _normalize(from_dir).split(_SEP) if p]
    to_parts = [p for p in _normalize(to_path).split(_SEP) if p]

    common = 0
    for a, b in zip(from_parts, to_parts):
        if a != b:
            break
        common += 1

    parts = [".."] * (len(from_parts) - common) + to_parts[common:]
    return _SEP.join(parts) or "."


def truncate(name: str, max_bytes: int) -> str:
    """Shorten ``name`` to at most ``max_bytes`` UTF-8 bytes.

    Cuts on a code point boundary, so the result may be a few bytes shorter
    than the budget when the cut would land inside a multi-byte character.
    """
    if max_bytes <= 0:
        return ""
    encoded = name.encode("utf-8")
    if len(encoded) <= max_bytes:
        return name
    # A partial trailing sequence is dropped by the decoder
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


def _fold(value: str, ignore_case: bool) -> str:
    return value.translate(_ASCII_LOWER) if ignore_case else value


def starts_with(value: str, prefix: str, ignore_case: bool = False) -> bool:
    """Prefix test; ``ignore_case`` folds ASCII letters only."""
    return _fold(value, ignore_case).startswith(_fold(prefix, ignore_case))


def ends_with(value: str, suffix: str, ignore_case: bool = False) -> bool:
    """Suffix test; ``ignore_case`` folds ASCII letters only."""
    return _fold(value, ignore_case).endswith(_fold(suffix, ignore_case))


def parent_dir(path: str) -> str:
    """Folder part of an absolute path ('/a/b/c.m3u' -> '/a/b')."""
    head, _, _ = _normalize(path).rpartition(_SEP)
    return head or _SEP


def join_path(folder: str, name: str) -> str:
    """Join a root-relative folder and a file name."""
    return _normalize(f"{folder}{_SEP}{name}")


__all__ = [
    "resolve_relative_path",
    "relative_path",
    "truncate",
    "starts_with",
    "ends_with",
    "parent_dir",
    "join_path",
]
