"""Version marker naming.

Marker files are published per release channel, e.g.
``https://dl.k8s.io/release/stable.txt`` or ``https://dl.k8s.io/ci/latest-1.18.txt``.
"""

from __future__ import annotations

__all__ = [
    "STABLE_MARKER",
    "LATEST_MARKER",
    "RELEASE_BRANCH_PREFIX",
    "marker_file_for_branch",
    "marker_url",
]

STABLE_MARKER = "stable.txt"
LATEST_MARKER = "latest.txt"
RELEASE_BRANCH_PREFIX = "release-"


def marker_file_for_branch(branch: str, trunk: str = "master") -> str:
    """Return the CI marker file name for ``branch``.

    >>> marker_file_for_branch("master")
    'latest.txt'
    >>> marker_file_for_branch("release-1.18")
    'latest-1.18.txt'
    """
    if branch == trunk:
        return LATEST_MARKER
    version = branch.removeprefix(RELEASE_BRANCH_PREFIX)
    return f"latest-{version}.txt"


def marker_url(base: str, marker_file: str) -> str:
    """Join a marker host base URL and a marker file name."""
    return f"{base.rstrip('/')}/{marker_file.lstrip('/')}"
