from __future__ import annotations
"""Filesystem capability abstraction.

Service and codec code never touches the real disk; it talks to an object
implementing this interface, rooted at a base folder (typically the user's
home folder in the hosting storage). A concrete backend and the in-memory
fake used in unit tests both implement it.

Path conventions:
  * path *arguments* are relative to the base folder root and use '/'
    separators (``/music/rock/a.mp3``);
  * ``Node.path`` is the absolute path inside the storage
    (``/alice/files/music/rock/a.mp3``).

Keep write operations explicit (no generic "execute") so tests can assert
on exactly what was written or deleted.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, List, Union

NodeId = Union[int, str]


@dataclass(frozen=True)
class Node:
    """Opaque handle to a file or folder in the storage."""
    id: NodeId
    path: str
    is_folder: bool = False


class FileSystemInterface(ABC):
    # --- Lookup ---
    @abstractmethod
    def exists(self, path: str) -> bool: ...

    @abstractmethod
    def resolve(self, path: str) -> Node:
        """Return the node at a root-relative path.

        Raises:
            NotFoundError: If nothing exists at ``path``
        """
        ...

    @abstractmethod
    def get_by_id(self, node_id: NodeId) -> List[Node]:
        """Return all nodes with the given id below the root (empty if none)."""
        ...

    @abstractmethod
    def non_colliding_name(self, folder_path: str, name: str) -> str:
        """Return a variant of ``name`` that does not exist in ``folder_path``."""
        ...

    # --- Writes ---
    @abstractmethod
    def new_file(self, path: str) -> Node:
        """Create an empty file at a root-relative path.

        Raises:
            PermissionDeniedError: If the folder is not writable
        """
        ...

    @abstractmethod
    def put_content(self, node: Node, data: bytes) -> None: ...

    @abstractmethod
    def delete(self, node: Node) -> None: ...

    # --- Content & metadata ---
    @abstractmethod
    def open_for_read(self, node: Node) -> BinaryIO:
        """Open a binary stream; callers close it (use as a context manager)."""
        ...

    @abstractmethod
    def get_content(self, node: Node) -> bytes: ...

    @abstractmethod
    def content_type(self, node: Node) -> str: ...

    @abstractmethod
    def absolute_path(self, node: Node) -> str: ...

    @abstractmethod
    def relative_path_from_root(self, absolute_path: str) -> str:
        """Convert an absolute storage path to a root-relative one."""
        ...


__all__ = ["FileSystemInterface", "Node", "NodeId"]
