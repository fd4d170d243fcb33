"""Version lookup in local build output.

A Kubernetes checkout is built either with Bazel or with the dockerized
``make release`` flow; each leaves the version in a different place:

- Bazel: ``bazel-genfiles/version`` (plain text) next to
  ``bazel-bin/build/release-tars/kubernetes.tar.gz``
- Docker: the ``kubernetes/version`` entry of
  ``_output/release-tars/kubernetes.tar.gz``

Nothing here writes to the build directory.
"""

from __future__ import annotations

import tarfile
import zlib
from pathlib import Path

from relver.core.result import Err, Ok, Result
from relver.version.errors import ArtifactReadError

__all__ = [
    "BAZEL_BUILD_PATH",
    "BAZEL_VERSION_PATH",
    "DOCKER_BUILD_PATH",
    "DOCKER_VERSION_PATH",
    "KUBERNETES_TAR",
    "detect_build_system",
    "read_bazel_version",
    "read_build_version",
    "read_dockerized_version",
]

DOCKER_BUILD_PATH = "_output/release-tars"
BAZEL_BUILD_PATH = "bazel-bin/build/release-tars"
BAZEL_VERSION_PATH = "bazel-genfiles/version"
DOCKER_VERSION_PATH = "kubernetes/version"
KUBERNETES_TAR = "kubernetes.tar.gz"


def bazel_tarball(build_dir: Path) -> Path:
    return build_dir / BAZEL_BUILD_PATH / KUBERNETES_TAR


def docker_tarball(build_dir: Path) -> Path:
    return build_dir / DOCKER_BUILD_PATH / KUBERNETES_TAR


def read_bazel_version(build_dir: Path) -> Result[str, ArtifactReadError]:
    """Read the version written by a Bazel build, untrimmed."""
    path = build_dir / BAZEL_VERSION_PATH
    try:
        return Ok(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(ArtifactReadError(path=path, message="Bazel version file not found"))
    except UnicodeDecodeError as e:
        return Err(ArtifactReadError(path=path, message=f"Decode error: {e}"))
    except OSError as e:
        return Err(ArtifactReadError(path=path, message=f"Cannot read version file ({e})"))


def read_dockerized_version(build_dir: Path) -> Result[str, ArtifactReadError]:
    """Read the version from the dockerized release tarball, trimmed."""
    archive = docker_tarball(build_dir)
    if not archive.is_file():
        return Err(ArtifactReadError(path=archive, message="Release tarball not found"))

    try:
        with tarfile.open(archive, "r:gz") as tar:
            try:
                member = tar.getmember(DOCKER_VERSION_PATH)
            except KeyError:
                return Err(
                    ArtifactReadError(
                        path=archive, message=f"Archive has no '{DOCKER_VERSION_PATH}' entry"
                    )
                )
            handle = tar.extractfile(member)
            if handle is None:
                return Err(
                    ArtifactReadError(
                        path=archive,
                        message=f"Archive entry '{DOCKER_VERSION_PATH}' is not a regular file",
                    )
                )
            with handle:
                content = handle.read()
    except (tarfile.TarError, EOFError, zlib.error) as e:
        return Err(ArtifactReadError(path=archive, message=f"Cannot decompress archive ({e})"))
    except OSError as e:
        return Err(ArtifactReadError(path=archive, message=f"Cannot read archive ({e})"))

    try:
        return Ok(content.decode("utf-8").strip())
    except UnicodeDecodeError as e:
        return Err(ArtifactReadError(path=archive, message=f"Decode error: {e}"))


def _mtime(path: Path) -> Result[float | None, ArtifactReadError]:
    try:
        return Ok(path.stat().st_mtime)
    except FileNotFoundError:
        return Ok(None)
    except OSError as e:
        return Err(ArtifactReadError(path=path, message=f"Cannot stat artifact ({e})"))


def detect_build_system(build_dir: Path) -> Result[bool, ArtifactReadError]:
    """Return Ok(True) when the most recent release tarball came from Bazel.

    The Bazel tarball must be strictly newer than the dockerized one.
    A missing tarball never counts as the most recent.
    """
    bazel = _mtime(bazel_tarball(build_dir))
    if isinstance(bazel, Err):
        return bazel
    docker = _mtime(docker_tarball(build_dir))
    if isinstance(docker, Err):
        return docker

    if bazel.value is None:
        return Ok(False)
    if docker.value is None:
        return Ok(True)
    return Ok(bazel.value > docker.value)


def read_build_version(
    build_dir: Path, built_with_bazel: bool | None = None
) -> Result[str, ArtifactReadError]:
    """Read the version of whichever build system produced the newest tarball.

    Pass ``built_with_bazel`` when the caller already ran ``detect_build_system``.
    """
    if built_with_bazel is None:
        detected = detect_build_system(build_dir)
        if isinstance(detected, Err):
            return detected
        built_with_bazel = detected.value
    if built_with_bazel:
        return read_bazel_version(build_dir)
    return read_dockerized_version(build_dir)
