"""Syntactic checks on release version strings.

Both checks are total: malformed input yields False, never an error.
"""

from __future__ import annotations

import re

__all__ = ["is_valid_release_build", "is_dirty_build"]


# A bare numeric component may follow the pre-release tag, as in
# the "1" of "v1.18.0-alpha.1".
_VERSION_RELEASE_RE = (
    r"v(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)(-[a-zA-Z0-9]+)*\.*(0|[1-9][0-9]*)?"
)
_VERSION_BUILD_RE = r"([0-9]{1,})\+([0-9a-f]{5,40})"
_VERSION_DIRTY_RE = r"(-dirty)"

_RELEASE_BUILD_RE = re.compile(
    _VERSION_RELEASE_RE + r"(\." + _VERSION_BUILD_RE + r")?" + _VERSION_DIRTY_RE + "?"
)


def is_valid_release_build(build: str) -> bool:
    """Check that ``build`` is, as a whole, a release version.

    Accepts e.g. ``v1.18.0``, ``v1.18.0-beta.2``,
    ``v1.19.0-alpha.0.1234+0123456789abcdef`` and any of those with ``-dirty``.
    """
    return _RELEASE_BUILD_RE.fullmatch(build) is not None


def is_dirty_build(build: str) -> bool:
    """Check whether the version was built from a tree with local changes."""
    return "dirty" in build
