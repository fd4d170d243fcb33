"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relver.core.errors import ErrorCode
from relver.output.console import Style
from relver.version.errors import (
    ArtifactReadError,
    FetchError,
    FormatError,
    NotFoundError,
    VersionError,
)

if TYPE_CHECKING:
    from relver.output.console import ConsoleProtocol

__all__ = ["print_version_error", "version_error_exit_code"]


def print_version_error(error: VersionError, console: ConsoleProtocol) -> None:
    """Print a resolution error with a hint where one helps."""
    match error:
        case FetchError(url=url, status=status, message=message):
            if status:
                console.error(f"fetch failed: HTTP {status} {message}")
            else:
                console.error(f"fetch failed: {message}")
            console.print(f"url: {url}", Style.DIM)
        case FormatError(value=value, message=message):
            console.error(f"{message}: {value!r}")
            console.print("hint: retry without --semver to keep the raw version", Style.DIM)
        case ArtifactReadError(path=path, message=message):
            console.error(f"{message}: {path}")
            console.print("hint: build the release tarballs first", Style.DIM)
        case NotFoundError(what=what, source=source):
            console.error(f"{what} not found")
            console.print(f"searched: {source}", Style.DIM)


def version_error_exit_code(error: VersionError) -> int:
    """Get exit code for a resolution error."""
    match error:
        case FetchError():
            return int(ErrorCode.NETWORK_ERROR)
        case ArtifactReadError():
            return int(ErrorCode.IO_ERROR)
        case FormatError():
            return int(ErrorCode.FORMAT_ERROR)
        case NotFoundError():
            return int(ErrorCode.NOT_FOUND)
