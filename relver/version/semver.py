from __future__ import annotations

import re
from dataclasses import dataclass

from relver.core.result import Err, Ok, Result
from relver.version.errors import FormatError

__all__ = ["SemVer", "parse_semver", "normalize_version"]


_NUM = r"0|[1-9]\d*"
_PRE_IDENT = r"(?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*)"
_BUILD_IDENT = r"[0-9A-Za-z-]+"

_SEMVER_RE = re.compile(
    rf"(?P<major>{_NUM})\.(?P<minor>{_NUM})\.(?P<patch>{_NUM})"
    rf"(?:-(?P<pre>{_PRE_IDENT}(?:\.{_PRE_IDENT})*))?"
    rf"(?:\+(?P<build>{_BUILD_IDENT}(?:\.{_BUILD_IDENT})*))?"
)


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def render(self) -> str:
        out = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            out += "-" + ".".join(self.prerelease)
        if self.build:
            out += "+" + ".".join(self.build)
        return out

    def __str__(self) -> str:
        return self.render()


def parse_semver(text: str) -> Result[SemVer, FormatError]:
    """Parse a strict semver 2.0.0 string (no leading ``v``)."""
    if not text:
        return Err(FormatError(value=text, message="version string is empty"))

    m = _SEMVER_RE.fullmatch(text)
    if m is None:
        return Err(FormatError(value=text, message="not a valid semantic version"))

    pre = m.group("pre")
    build = m.group("build")
    return Ok(
        SemVer(
            major=int(m.group("major")),
            minor=int(m.group("minor")),
            patch=int(m.group("patch")),
            prerelease=tuple(pre.split(".")) if pre else (),
            build=tuple(build.split(".")) if build else (),
        )
    )


def normalize_version(text: str) -> Result[str, FormatError]:
    """Strip one leading ``v`` and re-render as canonical semver.

    ``"v1.2.3"`` becomes ``"1.2.3"``; build descriptors such as
    ``"v1.18.0-alpha.1.5+abc12"`` survive, informal strings fail.
    """
    stripped = text[1:] if text.startswith("v") else text
    return parse_semver(stripped).map(SemVer.render)
