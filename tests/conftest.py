"""Pytest fixtures for test configuration.

Global test safety measures:
 - Never pick up a developer's .env (PFIO_ENABLE_DOTENV is cleared)
 - Strip PFIO__ variables so config defaults are deterministic
"""
import os
from typing import Any, Dict

import pytest

# Expose mock fixtures (memory_fs, mock_library, music_fs, music_library)
from tests.mocks.fixtures import *  # noqa: F401,F403


def pytest_sessionstart(session):  # type: ignore[no-untyped-def]
    os.environ.pop('PFIO_ENABLE_DOTENV', None)
    for key in [k for k in os.environ if k.startswith('PFIO__')]:
        os.environ.pop(key)


@pytest.fixture
def test_config() -> Dict[str, Any]:
    """Provide a minimal test configuration as a dict.

    Tests can override individual values using dict update or deep_merge.
    """
    return {
        'log_level': 'DEBUG',
        'formats': {
            'm3u_encoding': 'ISO-8859-1',
            'm3u8_encoding': 'UTF-8',
            'pls_fallback_encoding': 'ISO-8859-1',
            'm3u_content_type': 'audio/mpegurl',
            'pls_content_type': 'audio/x-scpls',
        },
        'export': {
            'collision_mode': 'abort',
            'max_name_bytes': 250,
            'extension_reserve': 5,
            'suffix_reserve': 5,
            'extension': '.m3u8',
        },
    }
