"""Unit tests for errorchain.chain.type_name."""
from __future__ import annotations

import pytest

from errorchain.chain.type_name import extract_type_name


class CustomReprError(Exception):
    def __repr__(self) -> str:
        return "a custom representation"


# ---------------------------------------------------------------------------
# Delimiters
# ---------------------------------------------------------------------------


class TestDelimiters:
    def test_bare_identifier(self) -> None:
        assert extract_type_name("MyStruct") == "MyStruct"

    def test_tuple_style(self) -> None:
        assert extract_type_name("MyStruct(5)") == "MyStruct"

    def test_struct_style(self) -> None:
        assert extract_type_name("MyStruct { field: 1 }") == "MyStruct"

    def test_brace_without_space(self) -> None:
        assert extract_type_name("MyStruct{field: 1}") == "MyStruct"

    def test_pretty_printed_multiline(self) -> None:
        text = "ParseIntError {\n    kind: InvalidDigit,\n}"
        assert extract_type_name(text) == "ParseIntError"

    def test_newline_directly_after_name(self) -> None:
        assert extract_type_name("ParseIntError\n{ kind: InvalidDigit }") == "ParseIntError"

    def test_carriage_return(self) -> None:
        assert extract_type_name("Timeout\r\nafter 5s") == "Timeout"

    def test_first_delimiter_wins(self) -> None:
        assert extract_type_name("Outer(Inner { x: 1 })") == "Outer"

    def test_python_exception_repr(self) -> None:
        assert extract_type_name(repr(ValueError("bad value"))) == "ValueError"

    def test_python_exception_repr_without_args(self) -> None:
        assert extract_type_name(repr(KeyError())) == "KeyError"


# ---------------------------------------------------------------------------
# Trimming and degenerate input
# ---------------------------------------------------------------------------


class TestTrimming:
    def test_selected_token_is_trimmed(self) -> None:
        assert extract_type_name("\tMyStruct(5)") == "MyStruct"

    def test_trailing_tab_is_trimmed(self) -> None:
        assert extract_type_name("MyStruct\t") == "MyStruct"

    @pytest.mark.parametrize("text", ["\x1cFoo", "\x1dFoo", "\x1eFoo", "Foo\x1f"])
    def test_control_separators_are_kept(self, text: str) -> None:
        assert extract_type_name(text) == text

    @pytest.mark.parametrize("space", ["\x0b", "\x0c", "\x85", "\xa0", "\u2003", "\u3000"])
    def test_unicode_whitespace_is_trimmed(self, space: str) -> None:
        assert extract_type_name(f"{space}Foo{space}") == "Foo"

    @pytest.mark.parametrize("text", [" MyStruct", "\nMyStruct", "(5)", "{ a: 1 }", "\r\n"])
    def test_leading_delimiter_yields_empty_name(self, text: str) -> None:
        assert extract_type_name(text) == ""

    def test_empty_string_yields_empty_name(self) -> None:
        assert extract_type_name("") == ""

    def test_custom_repr_gives_first_word(self) -> None:
        assert extract_type_name(repr(CustomReprError())) == "a"
