from __future__ import annotations
import pytest
from .memory_fs import MemoryFileSystem
from .mock_library import MockLibrary


@pytest.fixture
def memory_fs():
    return MemoryFileSystem()


@pytest.fixture
def mock_library():
    return MockLibrary()


@pytest.fixture
def music_fs(memory_fs):
    """A home folder with a small music tree and an empty 'playlists' folder.

    /music/rock/a.mp3, /music/rock/b.mp3, /music/jazz/c.mp3, /music/ünïcode.mp3
    """
    memory_fs.add_file('/music/rock/a.mp3', b'a')
    memory_fs.add_file('/music/rock/b.mp3', b'b')
    memory_fs.add_file('/music/jazz/c.mp3', b'c')
    memory_fs.add_file('/music/ünïcode.mp3', b'u')
    memory_fs.add_folder('/playlists')
    return memory_fs


@pytest.fixture
def music_library(music_fs, mock_library):
    """Tracks for every audio file of ``music_fs`` plus playlist 1 ('Road trip')."""
    a = music_fs.resolve('/music/rock/a.mp3')
    b = music_fs.resolve('/music/rock/b.mp3')
    c = music_fs.resolve('/music/jazz/c.mp3')
    mock_library.add_track(101, 'Alpha', 'The Band', 180, a.id)
    mock_library.add_track(102, 'Beta', None, 215.7, b.id)
    mock_library.add_track(103, 'Gamma', 'Quartet', None, c.id)
    mock_library.add_playlist(1, 'Road trip', track_ids=[101, 102, 103])
    return mock_library
