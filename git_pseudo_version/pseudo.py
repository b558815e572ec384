"""
Pseudo-version construction.

Builds a semantic version for an untagged revision from a base tag (if any),
the commit time and a short revision id. There are three forms:

    vMAJOR.0.0-yyyymmddhhmmss-abcdef123456               no usable base tag
    vX.Y.(Z+1)-0.yyyymmddhhmmss-abcdef123456[+build]     base is a release
    vX.Y.Z-pre.0.yyyymmddhhmmss-abcdef123456[+build]     base is a pre-release

Each form sorts after its base tag and before the next real release.
"""

from datetime import datetime, timezone

from .semver import SemverInfo, SemverKind, classify
from .utils import increment_decimal

# yyyymmddhhmmss, year always four digits
PSEUDO_VERSION_TIMESTAMP_FORMAT = '{0.year:04d}{0.month:02d}{0.day:02d}{0.hour:02d}{0.minute:02d}{0.second:02d}'
DEFAULT_MAJOR = 'v0'


def format_timestamp(t: datetime) -> str:
    """Format a commit time as UTC yyyymmddhhmmss. Naive datetimes are taken as UTC."""
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    return PSEUDO_VERSION_TIMESTAMP_FORMAT.format(t.astimezone(timezone.utc))


def _untagged(major: str, info: SemverInfo, segment: str) -> str:
    return f'{major}.0.0-{segment}'


def _after_release(major: str, info: SemverInfo, segment: str) -> str:
    # Bump the patch so the result sorts above the release tag itself
    i = info.canonical.rindex('.') + 1
    prefix, patch = info.canonical[:i], info.canonical[i:]
    return f'v{prefix}{increment_decimal(patch)}-0.{segment}{info.build}'


def _after_prerelease(major: str, info: SemverInfo, segment: str) -> str:
    return f'v{info.canonical}.0.{segment}{info.build}'


_FORMS = {
    SemverKind.INVALID: _untagged,
    SemverKind.RELEASE: _after_release,
    SemverKind.PRERELEASE: _after_prerelease,
}


def pseudo_version(major: str, older: str, t: datetime, rev: str) -> str:
    """
    Build a pseudo-version.
    
    Args:
        major: Major version prefix such as "v2"; empty means "v0"
        older: Preceding tag ("", "v1.2.3" or "v1.2.3-pre"); anything that is
            not a valid semantic version is treated as no tag
        t: Commit time, converted to UTC
        rev: Revision identifier, normally already shortened to 12 hex digits
        
    Returns:
        str: The pseudo-version, e.g. "v1.2.4-0.20230102030405-abcdef012345"
    """
    if not major:
        major = DEFAULT_MAJOR
    
    segment = f'{format_timestamp(t)}-{rev}'
    info = classify(older)
    return _FORMS[info.kind](major, info, segment)
