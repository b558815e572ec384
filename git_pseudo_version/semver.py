"""
Semantic version classification.

Splits a claimed semantic version into its canonical form, build metadata
and pre-release label. Anything that does not parse is classified as
invalid instead of raising, so callers can treat a missing or malformed
tag as "no base version".

Accepted syntax (the leading 'v' is optional):
    MAJOR                       -> MAJOR.0.0
    MAJOR.MINOR                 -> MAJOR.MINOR.0
    MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Iterable, List, Optional, Tuple

_NUMBER = r'(?:0|[1-9][0-9]*)'
_IDENTIFIERS = r'[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*'

SEMVER_PATTERN = re.compile(
    rf'v?(?P<major>{_NUMBER})'
    rf'(?:\.(?P<minor>{_NUMBER})'
    rf'(?:\.(?P<patch>{_NUMBER})'
    rf'(?:-(?P<prerelease>{_IDENTIFIERS}))?'
    rf'(?P<build>\+{_IDENTIFIERS})?'
    r')?)?'
)


class SemverKind(Enum):
    """Classification of a version string."""
    INVALID = 'invalid'
    RELEASE = 'release'
    PRERELEASE = 'prerelease'


@dataclass(frozen=True)
class SemverInfo:
    """Decomposed semantic version. Empty canonical means invalid."""
    
    canonical: str = ''
    build: str = ''
    prerelease: str = ''
    
    @property
    def is_valid(self) -> bool:
        return self.canonical != ''
    
    @property
    def has_prerelease(self) -> bool:
        return self.prerelease != ''
    
    @property
    def kind(self) -> SemverKind:
        if not self.is_valid:
            return SemverKind.INVALID
        if self.has_prerelease:
            return SemverKind.PRERELEASE
        return SemverKind.RELEASE


INVALID = SemverInfo()


def _has_bad_number(prerelease: str) -> bool:
    """Numeric pre-release identifiers must not have leading zeros."""
    return any(
        part.isdigit() and len(part) > 1 and part.startswith('0')
        for part in prerelease.split('.')
    )


def classify(version: str) -> SemverInfo:
    """
    Classify a version string.
    
    Args:
        version: Claimed semantic version, e.g. "v1.2.3-rc.1+exp", "1.4", ""
        
    Returns:
        SemverInfo: Canonical form ("1.2.3-rc.1"), build suffix ("+exp") and
        pre-release label ("rc.1"), or INVALID if the string does not parse
    """
    if not version:
        return INVALID
    
    match = SEMVER_PATTERN.fullmatch(version)
    if not match:
        return INVALID
    
    major, minor, patch = match.group('major', 'minor', 'patch')
    prerelease = match.group('prerelease') or ''
    build = match.group('build') or ''
    
    if prerelease and _has_bad_number(prerelease):
        return INVALID
    
    # Fill in shorthand forms: v1 -> 1.0.0, v1.2 -> 1.2.0
    canonical = f"{major}.{minor or '0'}.{patch or '0'}"
    if prerelease:
        canonical += f'-{prerelease}'
    
    return SemverInfo(canonical=canonical, build=build, prerelease=prerelease)


def _core_tuple(canonical: str) -> Tuple[int, int, int]:
    core = canonical.split('-', 1)[0]
    major, minor, patch = core.split('.')
    return (int(major), int(minor), int(patch))


def _compare_prerelease(x: List[str], y: List[str]) -> int:
    for a, b in zip(x, y):
        if a == b:
            continue
        a_num, b_num = a.isdigit(), b.isdigit()
        if a_num and b_num:
            # No leading zeros, so a longer number is a bigger number
            return -1 if (len(a), a) < (len(b), b) else 1
        if a_num != b_num:
            # Numeric identifiers have lower precedence than alphanumeric ones
            return -1 if a_num else 1
        return -1 if a < b else 1
    
    if len(x) == len(y):
        return 0
    return -1 if len(x) < len(y) else 1


def compare(v: str, w: str) -> int:
    """
    Compare two versions by semantic version precedence.
    
    Build metadata is ignored. An invalid version sorts before every valid
    one and equal to any other invalid version.
    
    Returns:
        int: -1 if v < w, 0 if equal, 1 if v > w
    """
    vi, wi = classify(v), classify(w)
    if not vi.is_valid or not wi.is_valid:
        return int(vi.is_valid) - int(wi.is_valid)
    
    v_core, w_core = _core_tuple(vi.canonical), _core_tuple(wi.canonical)
    if v_core != w_core:
        return -1 if v_core < w_core else 1
    
    # A pre-release sorts before its release
    if vi.prerelease == wi.prerelease:
        return 0
    if not vi.prerelease:
        return 1
    if not wi.prerelease:
        return -1
    return _compare_prerelease(vi.prerelease.split('.'), wi.prerelease.split('.'))


def highest_version(versions: Iterable[str]) -> Optional[str]:
    """
    Pick the highest valid semantic version.
    
    Args:
        versions: Candidate version strings, e.g. tag names
        
    Returns:
        str: The candidate with the highest precedence, or None if none is valid
    """
    valid = [v for v in versions if classify(v).is_valid]
    if not valid:
        return None
    return max(valid, key=cmp_to_key(compare))
