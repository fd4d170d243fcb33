"""Version resolution and validation."""

from .errors import ArtifactReadError, FetchError, FormatError, NotFoundError, VersionError
from .artifacts import (
    detect_build_system,
    read_bazel_version,
    read_build_version,
    read_dockerized_version,
)
from .markers import marker_file_for_branch, marker_url
from .resolver import VersionResolver
from .semver import SemVer, normalize_version, parse_semver
from .validation import is_dirty_build, is_valid_release_build

__all__ = [
    # errors
    "ArtifactReadError",
    "FetchError",
    "FormatError",
    "NotFoundError",
    "VersionError",
    # artifacts
    "detect_build_system",
    "read_bazel_version",
    "read_build_version",
    "read_dockerized_version",
    # markers
    "marker_file_for_branch",
    "marker_url",
    # resolver
    "VersionResolver",
    # semver
    "SemVer",
    "normalize_version",
    "parse_semver",
    # validation
    "is_dirty_build",
    "is_valid_release_build",
]
