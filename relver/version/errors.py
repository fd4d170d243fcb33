"""Error kinds returned by version resolution.

Each kind is a frozen dataclass; ``VersionError`` is their union and is
matched exhaustively at the CLI boundary (see ``relver.output.errors``).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "ArtifactReadError",
    "FetchError",
    "FormatError",
    "NotFoundError",
    "VersionError",
]


@dataclass(frozen=True, slots=True)
class FetchError:
    """HTTP fetch failure.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@dataclass(frozen=True, slots=True)
class FormatError:
    """A version string is not strict semver."""

    value: str
    message: str

    def __str__(self) -> str:
        return f"{self.message}: {self.value!r}"


@dataclass(frozen=True, slots=True)
class ArtifactReadError:
    """A build artifact (file, archive, archive entry) could not be read."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message}: {self.path}"


@dataclass(frozen=True, slots=True)
class NotFoundError:
    """No usable version was found in any candidate source."""

    what: str
    source: str

    def __str__(self) -> str:
        return f"{self.what} not found in {self.source}"


VersionError = FetchError | FormatError | ArtifactReadError | NotFoundError
