"""
Tests for pseudo.py module.

Tests each pseudo-version form, timestamp handling and the ordering
guarantees relative to the base tag.
"""

import pytest
from datetime import datetime, timedelta, timezone

from git_pseudo_version.pseudo import (
    PSEUDO_VERSION_TIMESTAMP_FORMAT,
    format_timestamp,
    pseudo_version
)
from git_pseudo_version.semver import classify, compare

SEGMENT = '20230102030405'


class TestFormatTimestamp:
    """Test commit time formatting."""
    
    def test_utc(self, commit_time):
        """Test formatting of a UTC time."""
        assert format_timestamp(commit_time) == SEGMENT
    
    def test_offset_converted_to_utc(self):
        """Test that a non-UTC time is normalized first."""
        t = datetime(2023, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(t) == SEGMENT
    
    def test_offset_crosses_day(self):
        """Test that normalization can change the date."""
        t = datetime(2023, 1, 1, 22, 0, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert format_timestamp(t) == '20230102030000'
    
    def test_naive_is_utc(self):
        """Test that naive datetimes are taken as UTC."""
        assert format_timestamp(datetime(2023, 1, 2, 3, 4, 5)) == SEGMENT
    
    def test_year_before_1000_is_padded(self):
        """Test that the year is always four digits."""
        t = datetime(999, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert format_timestamp(t) == '09990102030405'
        assert pseudo_version('', '', t, 'abc') == 'v0.0.0-09990102030405-abc'
    
    def test_always_fourteen_digits(self):
        """Test that every field is zero padded."""
        for year in (1, 45, 999, 1970, 9999):
            stamp = format_timestamp(datetime(year, 1, 1, 0, 0, 0, tzinfo=timezone.utc))
            assert len(stamp) == 14
            assert stamp.isdigit()
    
    def test_format_template(self):
        """Test the template renders a datetime directly."""
        assert PSEUDO_VERSION_TIMESTAMP_FORMAT.format(datetime(2023, 1, 2, 3, 4, 5)) == SEGMENT


class TestUntagged:
    """Test the form used when there is no usable base tag."""
    
    def test_no_tag(self, commit_time):
        """Test default major with no base version."""
        assert pseudo_version('', '', commit_time, 'abcdef012345') == 'v0.0.0-20230102030405-abcdef012345'
    
    def test_explicit_major(self, commit_time):
        """Test a supplied major prefix."""
        assert pseudo_version('v2', '', commit_time, 'abcdef012345') == 'v2.0.0-20230102030405-abcdef012345'
    
    def test_invalid_tag_treated_as_absent(self, commit_time):
        """Test that a malformed base version falls back to the untagged form."""
        assert pseudo_version('', 'release-1', commit_time, 'abcdef012345') == 'v0.0.0-20230102030405-abcdef012345'
    
    def test_no_build_metadata(self, commit_time):
        """Test that nothing is appended after the revision."""
        assert pseudo_version('', 'junk+meta', commit_time, 'rev').endswith('-rev')


class TestAfterRelease:
    """Test the form used when the base tag is a release."""
    
    def test_patch_increment(self, commit_time):
        """Test patch is bumped before the pre-release segment."""
        assert pseudo_version('', 'v1.2.3', commit_time, 'abcdef012345') == 'v1.2.4-0.20230102030405-abcdef012345'
    
    def test_patch_carry(self, commit_time):
        """Test carry into a new digit."""
        assert pseudo_version('', 'v1.2.9', commit_time, 'beef') == 'v1.2.10-0.20230102030405-beef'
    
    def test_build_metadata_preserved(self, commit_time):
        """Test build metadata is appended verbatim."""
        assert pseudo_version('', 'v1.2.3+incompatible', commit_time, 'beef') == 'v1.2.4-0.20230102030405-beef+incompatible'
    
    def test_shorthand_base(self, commit_time):
        """Test a shorthand tag is expanded before bumping."""
        assert pseudo_version('', 'v1.2', commit_time, 'beef') == 'v1.2.1-0.20230102030405-beef'
    
    def test_base_without_prefix(self, commit_time):
        """Test a tag without v still yields a v-prefixed version."""
        assert pseudo_version('', '1.2.3', commit_time, 'beef') == 'v1.2.4-0.20230102030405-beef'
    
    def test_major_ignored_with_base(self, commit_time):
        """Test that the base tag, not the major prefix, drives the result."""
        assert pseudo_version('v5', 'v1.2.3', commit_time, 'beef') == 'v1.2.4-0.20230102030405-beef'


class TestAfterPrerelease:
    """Test the form used when the base tag is a pre-release."""
    
    def test_prerelease_extended(self, commit_time):
        """Test pre-release chain is extended and build metadata kept."""
        result = pseudo_version('', 'v1.2.3-rc.1+meta', commit_time, 'rev')
        assert result == f'v1.2.3-rc.1.0.{SEGMENT}-rev+meta'
    
    def test_prerelease_without_build(self, commit_time):
        """Test pre-release without build metadata."""
        result = pseudo_version('', 'v1.2.3-pre', commit_time, 'abcdef012345')
        assert result == f'v1.2.3-pre.0.{SEGMENT}-abcdef012345'


class TestProperties:
    """Test properties that hold for every pseudo-version."""
    
    @pytest.mark.parametrize('older', [
        'v0.0.0', 'v1.2.3', 'v1.2.9', 'v1.9.99', 'v10.0.0+build', 'v3',
    ])
    def test_sorts_between_release_and_next_patch(self, commit_time, older):
        """Test release base < pseudo-version < next patch release."""
        result = pseudo_version('', older, commit_time, 'abcdef012345')
        canonical = classify(older).canonical
        major, minor, patch = canonical.split('.')
        next_patch = f'v{major}.{minor}.{int(patch) + 1}'
        
        assert compare(result, older) == 1
        assert compare(result, next_patch) == -1
    
    @pytest.mark.parametrize('older', ['v1.2.3-rc.1', 'v1.0.0-alpha', 'v2.0.0-0'])
    def test_sorts_after_prerelease(self, commit_time, older):
        """Test pseudo-versions sort after their pre-release base but before the release."""
        result = pseudo_version('', older, commit_time, 'abcdef012345')
        release = 'v' + classify(older).canonical.split('-')[0]
        
        assert compare(result, older) == 1
        assert compare(result, release) == -1
    
    @pytest.mark.parametrize('older', ['', 'v1.2.3', 'v1.2.3-rc.1+meta', 'bogus'])
    def test_always_valid_semver(self, commit_time, older):
        """Test the result is itself a valid semantic version."""
        result = pseudo_version('', older, commit_time, 'abcdef012345')
        assert classify(result).is_valid
        assert f'{SEGMENT}-abcdef012345' in result
    
    def test_later_commits_sort_later(self):
        """Test pseudo-versions from the same base order by commit time."""
        early = datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        late = datetime(2024, 6, 1, 0, 0, 0, tzinfo=timezone.utc)
        
        assert compare(
            pseudo_version('', 'v1.2.3', early, 'ffffffffffff'),
            pseudo_version('', 'v1.2.3', late, '000000000000')
        ) == -1
    
    def test_deterministic(self, commit_time):
        """Test identical inputs give identical output."""
        assert pseudo_version('v1', 'v1.0.0', commit_time, 'abc') == pseudo_version('v1', 'v1.0.0', commit_time, 'abc')
