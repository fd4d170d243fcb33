"""Tests for relver.version.artifacts - local build output."""

from __future__ import annotations

import io
import os
import tarfile
from pathlib import Path

from relver.core.result import Err, Ok
from relver.version.artifacts import (
    detect_build_system,
    read_bazel_version,
    read_build_version,
    read_dockerized_version,
)
from relver.version.errors import ArtifactReadError

BAZEL_TAR = "bazel-bin/build/release-tars/kubernetes.tar.gz"
DOCKER_TAR = "_output/release-tars/kubernetes.tar.gz"


def create_tar_gz(path: Path, files: dict[str, bytes]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tarfile.open(path, "w:gz") as tar:
        for name, content in files.items():
            info = tarfile.TarInfo(name=name)
            info.size = len(content)
            tar.addfile(info, io.BytesIO(content))


def touch(path: Path, mtime: float) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    os.utime(path, (mtime, mtime))
    return path


class TestReadBazelVersion:
    def test_returns_contents_untrimmed(self, tmp_path: Path) -> None:
        version_file = tmp_path / "bazel-genfiles" / "version"
        version_file.parent.mkdir(parents=True)
        version_file.write_text("v1.18.0\n", encoding="utf-8")

        assert read_bazel_version(tmp_path) == Ok("v1.18.0\n")

    def test_missing_file(self, tmp_path: Path) -> None:
        result = read_bazel_version(tmp_path)
        assert isinstance(result, Err)
        assert isinstance(result.error, ArtifactReadError)
        assert result.error.path == tmp_path / "bazel-genfiles" / "version"


class TestReadDockerizedVersion:
    def test_reads_and_trims_entry(self, tmp_path: Path) -> None:
        create_tar_gz(
            tmp_path / DOCKER_TAR,
            {"kubernetes/README.md": b"docs", "kubernetes/version": b"v1.18.0-beta.1\n"},
        )
        assert read_dockerized_version(tmp_path) == Ok("v1.18.0-beta.1")

    def test_missing_archive(self, tmp_path: Path) -> None:
        result = read_dockerized_version(tmp_path)
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_corrupt_archive(self, tmp_path: Path) -> None:
        archive = tmp_path / DOCKER_TAR
        archive.parent.mkdir(parents=True)
        archive.write_bytes(b"definitely not gzip")

        result = read_dockerized_version(tmp_path)
        assert isinstance(result, Err)
        assert "decompress" in result.error.message

    def test_invalid_deflate_block(self, tmp_path: Path) -> None:
        archive = tmp_path / DOCKER_TAR
        archive.parent.mkdir(parents=True)
        # gzip member header followed by a deflate block of reserved type 3
        gzip_header = bytes([0x1F, 0x8B, 0x08, 0, 0, 0, 0, 0, 0, 0xFF])
        archive.write_bytes(gzip_header + b"\x07" + b"\x00" * 64)

        result = read_dockerized_version(tmp_path)
        assert isinstance(result, Err)
        assert "decompress" in result.error.message

    def test_damaged_deflate_stream(self, tmp_path: Path) -> None:
        archive = tmp_path / DOCKER_TAR
        blob = b"".join(f"line {i}\n".encode() for i in range(20_000))
        create_tar_gz(archive, {"kubernetes/blob": blob, "kubernetes/version": b"v1.18.0\n"})
        data = bytearray(archive.read_bytes())
        middle = len(data) // 2
        data[middle : middle + 64] = b"\xff" * 64
        archive.write_bytes(bytes(data))

        result = read_dockerized_version(tmp_path)
        assert isinstance(result, Err)
        assert isinstance(result.error, ArtifactReadError)

    def test_missing_entry(self, tmp_path: Path) -> None:
        create_tar_gz(tmp_path / DOCKER_TAR, {"kubernetes/README.md": b"docs"})

        result = read_dockerized_version(tmp_path)
        assert isinstance(result, Err)
        assert "kubernetes/version" in result.error.message


class TestDetectBuildSystem:
    def test_only_bazel(self, tmp_path: Path) -> None:
        touch(tmp_path / BAZEL_TAR, 1_000_000)
        assert detect_build_system(tmp_path) == Ok(True)

    def test_only_docker(self, tmp_path: Path) -> None:
        touch(tmp_path / DOCKER_TAR, 1_000_000)
        assert detect_build_system(tmp_path) == Ok(False)

    def test_neither(self, tmp_path: Path) -> None:
        assert detect_build_system(tmp_path) == Ok(False)

    def test_bazel_newer(self, tmp_path: Path) -> None:
        touch(tmp_path / BAZEL_TAR, 2_000_000)
        touch(tmp_path / DOCKER_TAR, 1_000_000)
        assert detect_build_system(tmp_path) == Ok(True)

    def test_docker_newer(self, tmp_path: Path) -> None:
        touch(tmp_path / BAZEL_TAR, 1_000_000)
        touch(tmp_path / DOCKER_TAR, 2_000_000)
        assert detect_build_system(tmp_path) == Ok(False)

    def test_same_mtime_is_not_newer(self, tmp_path: Path) -> None:
        touch(tmp_path / BAZEL_TAR, 1_000_000)
        touch(tmp_path / DOCKER_TAR, 1_000_000)
        assert detect_build_system(tmp_path) == Ok(False)


class TestReadBuildVersion:
    def test_dispatches_to_bazel(self, tmp_path: Path) -> None:
        touch(tmp_path / BAZEL_TAR, 2_000_000)
        version_file = tmp_path / "bazel-genfiles" / "version"
        version_file.parent.mkdir(parents=True)
        version_file.write_text("v1.18.0", encoding="utf-8")

        assert read_build_version(tmp_path) == Ok("v1.18.0")

    def test_dispatches_to_docker(self, tmp_path: Path) -> None:
        create_tar_gz(tmp_path / DOCKER_TAR, {"kubernetes/version": b" v1.17.4 \n"})
        assert read_build_version(tmp_path) == Ok("v1.17.4")

    def test_no_build_output(self, tmp_path: Path) -> None:
        result = read_build_version(tmp_path)
        assert isinstance(result, Err)
        assert isinstance(result.error, ArtifactReadError)

    def test_known_build_system_skips_detection(self, tmp_path: Path) -> None:
        touch(tmp_path / DOCKER_TAR, 2_000_000)
        version_file = tmp_path / "bazel-genfiles" / "version"
        version_file.parent.mkdir(parents=True)
        version_file.write_text("v1.18.0", encoding="utf-8")

        assert read_build_version(tmp_path, built_with_bazel=True) == Ok("v1.18.0")
