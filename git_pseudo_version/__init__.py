"""
git-pseudo-version

Generates sortable semantic pseudo-versions (v0.0.0-20230102030405-abcdef012345)
for untagged git revisions.

Public API:
    pseudo_version   build a pseudo-version from a base tag, commit time and revision
    classify         split a semantic version into canonical form, pre-release and build
    compare          order two versions by semantic version precedence (-1, 0, 1)
    highest_version  pick the highest valid version from a list of tags
    shorten_revision, increment_decimal
"""

from ._version import __version__
from .pseudo import pseudo_version
from .semver import classify, compare, highest_version
from .utils import increment_decimal, shorten_revision

__description__ = "Generate semantic pseudo-versions for untagged git revisions"
