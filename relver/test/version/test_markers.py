from __future__ import annotations

from relver.version.markers import marker_file_for_branch, marker_url


def test_trunk_maps_to_latest() -> None:
    assert marker_file_for_branch("master") == "latest.txt"


def test_release_branch_maps_to_minor_marker() -> None:
    assert marker_file_for_branch("release-1.18") == "latest-1.18.txt"


def test_other_branch_is_used_verbatim() -> None:
    assert marker_file_for_branch("feature-x") == "latest-feature-x.txt"


def test_custom_trunk() -> None:
    assert marker_file_for_branch("main", trunk="main") == "latest.txt"
    assert marker_file_for_branch("master", trunk="main") == "latest-master.txt"


def test_marker_url_joins_with_single_slash() -> None:
    assert marker_url("https://dl.k8s.io/ci", "latest.txt") == "https://dl.k8s.io/ci/latest.txt"
    assert marker_url("https://dl.k8s.io/ci/", "/latest.txt") == "https://dl.k8s.io/ci/latest.txt"
