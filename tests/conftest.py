"""
Pytest configuration and shared fixtures for test suite.

Provides commit times, revision hashes, mocked git results and a mock
configuration object.
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock


FULL_SHA = '4f2c9a1b0e7d3c5a8b6f1e2d4c3b2a1908f7e6d5'


@pytest.fixture
def commit_time():
    """Fixed commit time 2023-01-02T03:04:05Z."""
    return datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def full_sha():
    """A full 40 character commit hash."""
    return FULL_SHA


@pytest.fixture
def git_result():
    """Factory for fake subprocess.run results."""
    def _make(stdout='', returncode=0, stderr=''):
        result = MagicMock()
        result.stdout = stdout
        result.returncode = returncode
        result.stderr = stderr
        return result
    return _make


@pytest.fixture
def mock_config():
    """Create a mock Config object with sensible defaults."""
    config = MagicMock()
    config.directory = '/repo'
    config.git_path = 'git'
    config.major = ''
    config.older = ''
    config.describe = False
    config.log_level = 'WARNING'
    return config
