"""Version resolution from published marker files.

``VersionResolver`` answers "which version is current on this channel?" by
fetching a marker file (one version string per file) and optionally
normalizing it to strict semver. It holds no state between calls: every
call performs its own fetch and nothing is cached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relver.core.config import EndpointsConfig
from relver.core.result import Err, Ok, Result
from relver.version.errors import FetchError, NotFoundError, VersionError
from relver.version.markers import (
    LATEST_MARKER,
    STABLE_MARKER,
    marker_file_for_branch,
    marker_url,
)
from relver.version.semver import normalize_version

if TYPE_CHECKING:
    from relver.net.http import HttpClient
    from relver.output.console import ConsoleProtocol

__all__ = ["VersionResolver"]


class VersionResolver:
    """Resolve build versions from release and CI marker files.

    Usage:
        resolver = VersionResolver(http=RealHttpClient(), console=RichConsole())
        match resolver.resolve_ci_for_branch("release-1.18", normalize=False):
            case Ok(version):
                ...
            case Err(error):
                ...
    """

    def __init__(
        self,
        *,
        http: HttpClient,
        console: ConsoleProtocol,
        endpoints: EndpointsConfig | None = None,
        trunk_branch: str = "master",
    ) -> None:
        self._http = http
        self._console = console
        self._endpoints = endpoints or EndpointsConfig()
        self._trunk_branch = trunk_branch

    def resolve_stable_release(self, normalize: bool) -> Result[str, VersionError]:
        self._console.info("Retrieving Kubernetes release version...")
        url = marker_url(self._endpoints.release_base, STABLE_MARKER)
        return self.resolve_marker(url, normalize)

    def resolve_stable_prerelease(self, normalize: bool) -> Result[str, VersionError]:
        self._console.info("Retrieving Kubernetes testing version...")
        url = marker_url(self._endpoints.release_base, LATEST_MARKER)
        return self.resolve_marker(url, normalize)

    def resolve_latest_ci(self, normalize: bool) -> Result[str, VersionError]:
        self._console.info("Retrieving Kubernetes latest build version...")
        url = marker_url(self._endpoints.ci_base, LATEST_MARKER)
        return self.resolve_marker(url, normalize)

    def resolve_ci_for_branch(self, branch: str, normalize: bool) -> Result[str, VersionError]:
        """Resolve the latest CI build of ``branch``.

        The trunk maps to ``latest.txt``, ``release-<minor>`` to
        ``latest-<minor>.txt``.
        """
        self._console.info(f"Retrieving Kubernetes build version on the '{branch}' branch...")
        marker_file = marker_file_for_branch(branch, self._trunk_branch)
        self._console.info(f"Version marker file: {marker_file}")
        url = marker_url(self._endpoints.ci_base, marker_file)
        return self.resolve_marker(url, normalize)

    def resolve_marker(self, url: str, normalize: bool) -> Result[str, VersionError]:
        """Fetch the marker at ``url`` and return its version.

        Args:
            url: Fully-qualified marker URL
            normalize: Strip a leading ``v`` and re-render as strict semver

        Returns:
            Ok with the trimmed (or normalized) version; Err with
            FetchError, NotFoundError (empty marker) or FormatError
        """
        self._console.info(f"Retrieving Kubernetes build version from {url}...")
        fetched = self._fetch_trimmed(url)
        if isinstance(fetched, Err):
            return fetched

        version = fetched.value
        if not version:
            return Err(NotFoundError(what="version", source=url))

        if normalize:
            normalized = normalize_version(version)
            if isinstance(normalized, Err):
                return normalized
            version = normalized.value

        self._console.info(f"Retrieved Kubernetes version: {version}")
        return Ok(version)

    def resolve_kubecross_version(self, *branches: str) -> Result[str, VersionError]:
        """Return the kube-cross image version of the first branch that has one.

        Branches are tried in order. A fetch failure is logged and skipped,
        except on the last branch where it is returned. When every fetch
        succeeds with an empty file the result is NotFoundError.
        """
        last = len(branches) - 1
        for i, branch in enumerate(branches):
            self._console.info(f"Trying to get the kube-cross version for {branch}...")
            url = self._endpoints.kubecross_url.format(branch=branch)

            fetched = self._fetch_trimmed(url)
            if isinstance(fetched, Err):
                if i == last:
                    return fetched
                self._console.warning(
                    f"Error retrieving the kube-cross version for the '{branch}': {fetched.error}"
                )
                continue

            if fetched.value:
                self._console.info(f"Found the following kube-cross version: {fetched.value}")
                return Ok(fetched.value)

        return Err(
            NotFoundError(
                what="kube-cross version (must not continue with an empty version)",
                source=", ".join(branches) or "no branches",
            )
        )

    def _fetch_trimmed(self, url: str) -> Result[str, FetchError]:
        return self._http.get_text(url).map(str.strip)
