"""Tests for relver.output.console module."""

from __future__ import annotations

import pytest

from relver.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_prefixes(self) -> None:
        console = MockConsole()
        console.info("fetching")
        console.warning("skipped")
        console.error("failed")
        assert console.messages == ["info: fetching", "warning: skipped", "error: failed"]
        assert console.has_warning()
        assert console.has_error()

    def test_find(self) -> None:
        console = MockConsole()
        console.info("Retrieving version from https://dl.k8s.io/ci/latest.txt...")
        console.info("unrelated")
        assert len(console.find("dl.k8s.io")) == 1

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("typed")


class TestRichConsole:
    def test_writes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.warning("careful")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "careful" in captured.err

    def test_quiet_hides_info_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole(quiet=True)
        console.info("progress")
        console.error("broken")
        captured = capsys.readouterr()
        assert "progress" not in captured.err
        assert "broken" in captured.err
