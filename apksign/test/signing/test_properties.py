"""Tests for apksign.signing.properties module."""

from __future__ import annotations

from pathlib import Path

import pytest

from apksign.core.result import Err, Ok
from apksign.signing.errors import PropertiesUnreadable
from apksign.signing.properties import load_properties, parse_properties


class TestParseProperties:
    def test_typical_key_properties(self) -> None:
        text = (
            "storePassword=s3cret\n"
            "keyPassword=k3y\n"
            "keyAlias=upload\n"
            "storeFile=/home/me/upload-keystore.jks\n"
        )
        assert parse_properties(text) == {
            "storePassword": "s3cret",
            "keyPassword": "k3y",
            "keyAlias": "upload",
            "storeFile": "/home/me/upload-keystore.jks",
        }

    def test_comments_and_blank_lines(self) -> None:
        text = "# comment\n! also comment\n\n   \n  # indented comment\nkeyAlias=a\n"
        assert parse_properties(text) == {"keyAlias": "a"}

    @pytest.mark.parametrize(
        "line",
        ["key=value", "key = value", "key:value", "key : value", "key value", "  key\t=  value"],
    )
    def test_separators(self, line: str) -> None:
        assert parse_properties(line) == {"key": "value"}

    def test_value_keeps_inner_separators(self) -> None:
        assert parse_properties("url=http://host:8080/a=b") == {"url": "http://host:8080/a=b"}

    def test_trailing_whitespace_is_kept(self) -> None:
        assert parse_properties("key=value  ") == {"key": "value  "}

    def test_key_without_value(self) -> None:
        assert parse_properties("lonely\n") == {"lonely": ""}

    def test_line_continuation(self) -> None:
        text = "storeFile=/very/long/\\\n        path/upload.jks\n"
        assert parse_properties(text) == {"storeFile": "/very/long/path/upload.jks"}

    def test_escaped_backslash_is_not_continuation(self) -> None:
        text = "dir=C:\\\\keys\\\\\nnext=1\n"
        assert parse_properties(text) == {"dir": "C:\\keys\\", "next": "1"}

    def test_escapes(self) -> None:
        text = "a\\=b=tab\\there\nuni=caf\\u00e9\nplain=\\q\n"
        assert parse_properties(text) == {"a=b": "tab\there", "uni": "café", "plain": "q"}

    def test_escaped_space_in_key(self) -> None:
        assert parse_properties("my\\ key=v") == {"my key": "v"}

    def test_crlf_line_endings(self) -> None:
        assert parse_properties("a=1\r\nb=2\r\n") == {"a": "1", "b": "2"}

    def test_comment_after_continuation_is_value(self) -> None:
        assert parse_properties("a=x\\\n#y\n") == {"a": "x#y"}

    def test_duplicate_key_last_wins(self) -> None:
        assert parse_properties("k=1\nk=2\n") == {"k": "2"}

    def test_malformed_unicode_escape(self) -> None:
        with pytest.raises(ValueError, match="Malformed"):
            parse_properties("k=\\u12")


class TestLoadProperties:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_text("keyAlias=upload\n", encoding="utf-8")
        assert load_properties(path) == Ok({"keyAlias": "upload"})

    def test_utf8_preferred(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_text("keyPassword=p\u00e4ss\n", encoding="utf-8")
        assert load_properties(path) == Ok({"keyPassword": "p\u00e4ss"})

    def test_latin1_fallback(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_bytes("keyPassword=p\xe4ss\n".encode("latin-1"))
        assert load_properties(path) == Ok({"keyPassword": "päss"})

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_properties(tmp_path / "missing.properties")
        assert isinstance(result, Err)
        assert isinstance(result.error, PropertiesUnreadable)

    def test_malformed_escape(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_text("k=\\uZZZZ\n", encoding="utf-8")
        result = load_properties(path)
        assert isinstance(result, Err)
        assert "Malformed" in result.error.reason
