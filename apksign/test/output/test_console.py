"""Tests for apksign.output.console module."""

from __future__ import annotations

import pytest

from apksign.output.console import ConsoleProtocol, MockConsole, OutputRecord, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.RAW) == "raw"


class TestMockConsole:
    """MockConsole records what would have been printed."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_prefixed_helpers(self) -> None:
        console = MockConsole()
        console.success("done")
        console.error("bad")
        console.warning("careful")
        console.header("Signing")
        assert console.messages == [
            "OK done",
            "error: bad",
            "warning: careful",
            "Signing",
        ]
        assert console.has_error()
        assert console.has_success()

    def test_raw_text_only_includes_raw(self) -> None:
        console = MockConsole()
        console.print("policy: ci-only", Style.DIM)
        console.raw('{"signing_config": "debug"}')
        assert console.raw_text == '{"signing_config": "debug"}'

    def test_find(self) -> None:
        console = MockConsole()
        console.print("alpha")
        console.print("beta")
        assert [o.message for o in console.find("alp")] == ["alpha"]

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("x")


class TestRichConsole:
    def test_markup_in_messages_is_not_interpreted(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.success("keystore [upload]")
        console.raw('{"a": [1, 2]}')
        out = capsys.readouterr().out
        assert "[upload]" in out
        assert '{"a": [1, 2]}' in out

    def test_errors_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("broken")
        captured = capsys.readouterr()
        assert "broken" in captured.err
        assert "broken" not in captured.out

    def test_emoji_codes_pass_through_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.raw("-Pandroid.injected.signing.key.password=p:fire:x")
        console.print("key alias: :smile:")
        out = capsys.readouterr().out
        assert "p:fire:x" in out
        assert ":smile:" in out
