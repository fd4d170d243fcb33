from __future__ import annotations

import pytest

from relver.version.validation import is_dirty_build, is_valid_release_build


@pytest.mark.parametrize(
    "build",
    [
        "v0.0.0",
        "v1.18.0",
        "v1.18.0-beta.2",
        "v1.18.0-rc.1",
        "v1.19.0-alpha.1.1234+0123abcd",
        "v1.18.0.25+abcde",
        "v1.18.0-dirty",
        "v1.18.0.25+abcde-dirty",
        "v1.2.3.4+" + "a" * 40,
    ],
)
def test_valid_release_builds(build: str) -> None:
    assert is_valid_release_build(build)


@pytest.mark.parametrize(
    "build",
    [
        "",
        "1.18.0",
        "v1.18",
        "v01.2.3",
        "v1.2.3.4+abcd",
        "v1.2.3.4+" + "a" * 41,
        "v1.2.3.4+ABCDE",
        "v1.2.3.4+abcdg",
        "v1.2.3 ",
        "xv1.2.3",
        "v1.2.3_rc1",
    ],
)
def test_invalid_release_builds(build: str) -> None:
    assert not is_valid_release_build(build)


def test_dirty_build_is_a_substring_check() -> None:
    assert is_dirty_build("v1.2.3-dirty")
    assert is_dirty_build("v1.18.0.25+abcde-dirty")
    assert is_dirty_build("dirty-looking-but-not")
    assert not is_dirty_build("v1.2.3")
    assert not is_dirty_build("")
