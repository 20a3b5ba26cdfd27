"""Tests for searchparams.codec — component decode, encode, stringify."""

import logging
from decimal import Decimal

import pytest

from searchparams.codec import decode_component, encode_component, stringify
from searchparams.errors import DecodeError, EncodeError


class TestDecodeComponent:
    def test_plain_text_unchanged(self) -> None:
        assert decode_component("hello") == "hello"

    def test_plus_is_space(self) -> None:
        assert decode_component("a+b+c") == "a b c"

    def test_percent_escapes(self) -> None:
        assert decode_component("both%3Bencoded") == "both;encoded"
        assert decode_component("%20") == " "

    def test_lowercase_hex(self) -> None:
        assert decode_component("%3b") == ";"

    def test_encoded_plus(self) -> None:
        assert decode_component("%2B+") == "+ "

    def test_utf8(self) -> None:
        assert decode_component("%E2%9C%93") == "✓"

    def test_empty(self) -> None:
        assert decode_component("") == ""

    @pytest.mark.parametrize(
        ("value", "position"),
        [("%", 0), ("ab%", 2), ("%g1", 0), ("x%1", 1), ("%20%2", 3)],
    )
    def test_bad_escape_position(self, value: str, position: int) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_component(value)
        assert exc_info.value.position == position
        assert exc_info.value.value == value

    def test_invalid_utf8(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_component("%C3")
        assert exc_info.value.position == 0
        assert "UTF-8" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_invalid_utf8_position_inside_run(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_component("ok%20%C3")
        assert exc_info.value.position == 5

    def test_split_multibyte_sequence_rejected(self) -> None:
        with pytest.raises(DecodeError):
            decode_component("%C3x%A9")

    def test_unescaped_text_passes_through(self) -> None:
        assert decode_component("\ud800") == "\ud800"
        assert decode_component("\ud800%20") == "\ud800 "
        assert decode_component("naïve%20é") == "naïve é"

    def test_encoded_surrogate_rejected(self) -> None:
        with pytest.raises(DecodeError):
            decode_component("%ED%A0%80")

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="searchparams"), pytest.raises(DecodeError):
            decode_component("100%")
        assert any("100%" in record.getMessage() for record in caplog.records)


class TestEncodeComponent:
    def test_unreserved_kept(self) -> None:
        unreserved = "AZaz09-_.!~*'()"
        assert encode_component(unreserved) == unreserved

    def test_space_is_percent_20(self) -> None:
        assert encode_component("hi there") == "hi%20there"

    @pytest.mark.parametrize(
        ("raw", "encoded"),
        [
            ("+", "%2B"),
            ("&", "%26"),
            ("=", "%3D"),
            ("?", "%3F"),
            ("/", "%2F"),
            ("#", "%23"),
            ("%", "%25"),
            (";", "%3B"),
        ],
    )
    def test_reserved_escaped(self, raw: str, encoded: str) -> None:
        assert encode_component(raw) == encoded

    def test_utf8_uppercase_hex(self) -> None:
        assert encode_component("é") == "%C3%A9"
        assert encode_component("😀") == "%F0%9F%98%80"

    def test_lone_surrogate(self) -> None:
        with pytest.raises(EncodeError) as exc_info:
            encode_component("a\udc00")
        assert isinstance(exc_info.value, ValueError)


class TestStringify:
    def test_str_passthrough(self) -> None:
        assert stringify("x") == "x"

    def test_numbers(self) -> None:
        assert stringify(11) == "11"
        assert stringify(1.5) == "1.5"
        assert stringify(Decimal("2.50")) == "2.50"

    def test_list_joined_with_commas(self) -> None:
        assert stringify(["some", "other", "value"]) == "some,other,value"

    def test_nested_and_none_items(self) -> None:
        assert stringify([1, None, ("a", "b")]) == "1,,a,b"

    def test_empty_list(self) -> None:
        assert stringify([]) == ""

    @pytest.mark.parametrize("value", [b"x", bytearray(b"x"), memoryview(b"x")])
    def test_bytes_like_rejected(self, value: object) -> None:
        with pytest.raises(TypeError):
            stringify(value)
