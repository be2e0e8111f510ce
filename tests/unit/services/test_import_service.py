"""Unit tests for the import service and playlist preview."""

from __future__ import annotations
from unittest.mock import Mock

import pytest
from pfio.errors import NotFoundError, UnsupportedFormatError
from pfio.services.import_service import import_from_file, parse_file

ROAD_TRIP = (
    '#EXTM3U\n'
    '#EXTINF:180,The Band - Alpha\n'
    '../music/rock/a.mp3\n'
    '../music/rock/b.mp3\n'
    '../music/ünïcode.mp3\n'
    '../music/missing.mp3\n'
)


@pytest.fixture
def empty_playlist(music_library):
    return music_library.add_playlist(2, 'Imported')


def test_matched_tracks_appended_and_failures_counted(music_fs, music_library, empty_playlist):
    music_fs.add_file('/playlists/road.m3u8', ROAD_TRIP)

    outcome = import_from_file(music_library, 2, 'alice', music_fs, '/playlists/road.m3u8', log=Mock())

    assert outcome.imported_count == 2
    # one path not found + one file without a track
    assert outcome.failed_count == 2
    assert outcome.playlist.track_ids == [101, 102]


def test_warning_lists_all_unmatched_paths(music_fs, music_library, empty_playlist):
    music_fs.add_file('/playlists/road.m3u8', ROAD_TRIP)
    log = Mock()

    import_from_file(music_library, 2, 'alice', music_fs, '/playlists/road.m3u8', log=log)

    log.warning.assert_called_once()
    message = log.warning.call_args[0][0]
    assert message.startswith("Some files were not found from the user's music library: ")
    assert '/music/missing.mp3' in message
    # non-ASCII names are kept readable
    assert '/alice/files/music/ünïcode.mp3' in message


def test_no_warning_when_everything_matches(music_fs, music_library, empty_playlist):
    music_fs.add_file('/playlists/ok.m3u8', '../music/rock/a.mp3\n../music/jazz/c.mp3\n')
    log = Mock()

    outcome = import_from_file(music_library, 2, 'alice', music_fs, '/playlists/ok.m3u8', log=log)

    log.warning.assert_not_called()
    assert outcome.failed_count == 0
    assert outcome.playlist.track_ids == [101, 103]


def test_unmatched_entries_never_abort(music_fs, music_library, empty_playlist):
    music_fs.add_file('/playlists/bad.m3u8', 'x.mp3\ny.mp3\n')

    outcome = import_from_file(music_library, 2, 'alice', music_fs, '/playlists/bad.m3u8', log=Mock())

    assert outcome.imported_count == 0
    assert outcome.failed_count == 2
    assert outcome.playlist.track_ids == []
    assert 'add_tracks' in music_library.call_log


def test_reimport_does_not_duplicate_tracks(music_fs, music_library):
    music_fs.add_file('/playlists/road.m3u8', ROAD_TRIP)

    # playlist 1 already holds 101, 102, 103
    outcome = import_from_file(music_library, 1, 'alice', music_fs, '/playlists/road.m3u8', log=Mock())

    assert outcome.imported_count == 2
    assert outcome.playlist.track_ids == [101, 102, 103]


def test_duplicate_entries_in_file_added_once(music_fs, music_library, empty_playlist):
    music_fs.add_file('/playlists/dup.m3u8', '../music/rock/a.mp3\n../music/rock/a.mp3\n')

    outcome = import_from_file(music_library, 2, 'alice', music_fs, '/playlists/dup.m3u8', log=Mock())

    assert outcome.playlist.track_ids == [101]


def test_tracks_of_other_owner_are_not_matched(music_fs, music_library):
    bob_file = music_fs.add_file('/music/bob.mp3', b'x')
    music_library.add_track(201, 'Bob song', None, 100, bob_file.id, owner='bob')
    music_library.add_playlist(2, 'Imported')
    music_fs.add_file('/music/list.m3u8', 'bob.mp3\n')

    outcome = import_from_file(music_library, 2, 'alice', music_fs, '/music/list.m3u8', log=Mock())

    assert outcome.imported_count == 0
    assert outcome.failed_count == 1


def test_pls_import(music_fs, music_library, empty_playlist):
    music_fs.add_file('/music/list.pls', '[playlist]\nFile1=jazz/c.mp3\nFile2=rock/a.mp3\n')

    outcome = import_from_file(music_library, 2, 'alice', music_fs, '/music/list.pls', log=Mock())

    assert outcome.playlist.track_ids == [103, 101]


def test_outcome_to_dict(music_fs, music_library, empty_playlist):
    music_fs.add_file('/playlists/ok.m3u8', '../music/rock/a.mp3\n')
    outcome = import_from_file(music_library, 2, 'alice', music_fs, '/playlists/ok.m3u8', log=Mock())

    data = outcome.to_dict()
    assert data['imported_count'] == 1
    assert data['failed_count'] == 0
    assert data['playlist'] is empty_playlist


class TestImportFailures:

    def test_unknown_playlist_checked_before_parsing(self, music_fs, music_library):
        music_fs.add_file('/playlists/road.m3u8', ROAD_TRIP)

        with pytest.raises(NotFoundError):
            import_from_file(music_library, 99, 'alice', music_fs, '/playlists/road.m3u8')

        assert music_fs.streams == []
        assert 'add_tracks' not in music_library.call_log

    def test_missing_file(self, music_fs, music_library):
        with pytest.raises(NotFoundError):
            import_from_file(music_library, 1, 'alice', music_fs, '/playlists/none.m3u8')

    def test_path_is_a_folder(self, music_fs, music_library):
        with pytest.raises(NotFoundError):
            import_from_file(music_library, 1, 'alice', music_fs, '/playlists')

    def test_unsupported_file_type(self, music_fs, music_library):
        music_fs.add_file('/music/notes.txt', 'rock/a.mp3\n', content_type='text/plain')

        with pytest.raises(UnsupportedFormatError):
            import_from_file(music_library, 1, 'alice', music_fs, '/music/notes.txt')

        assert 'add_tracks' not in music_library.call_log


class TestParseFile:

    def test_preview_by_file_id(self, music_fs):
        file = music_fs.add_file('/playlists/road.m3u8', ROAD_TRIP)

        result = parse_file(file.id, music_fs)

        assert [ref.file.path for ref in result.resolved] == [
            '/alice/files/music/rock/a.mp3',
            '/alice/files/music/rock/b.mp3',
            '/alice/files/music/ünïcode.mp3',
        ]
        assert result.resolved[0].caption == 'The Band - Alpha'
        assert result.unresolved_paths == ['/music/missing.mp3']

    def test_unknown_file_id(self, music_fs):
        with pytest.raises(NotFoundError):
            parse_file(12345, music_fs)
