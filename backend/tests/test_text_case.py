"""
Anythink Market Backend — Text Case Utility Tests
==================================================

What:  Tests for to_camel_case, to_kebab_case and to_dot_case.

What we test:
    ✅ Documented conversions for spaces, hyphens and underscores
    ✅ Runs of separators and surrounding whitespace collapse
    ✅ None / non-string / invalid characters / separator-only input raise ValidationError
"""

import pytest

from app.exceptions import ValidationError
from app.utils.text_case import split_words, to_camel_case, to_dot_case, to_kebab_case


class TestCamelCase:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("first name", "firstName"),
            ("user_id", "userId"),
            ("SCREEN_NAME", "screenName"),
            ("mobile-number", "mobileNumber"),
            ("sum sum soo", "sumSumSoo"),
            ("single", "single"),
        ],
    )
    def test_converts(self, value, expected):
        assert to_camel_case(value) == expected

    def test_mixed_separators_and_padding(self):
        assert to_camel_case("  api__base-URL  ") == "apiBaseUrl"

    @pytest.mark.parametrize("separator", ["\t", "\n", "\v", "\u00a0", "\u2003", "\u3000", "\ufeff"])
    def test_unicode_whitespace_separates_words(self, separator):
        assert to_camel_case(f"first{separator}name") == "firstName"


class TestKebabCase:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Hello World", "hello-world"),
            ("JavaScript Programming Language", "javascript-programming-language"),
            ("convert this to kebab case", "convert-this-to-kebab-case"),
            ("single", "single"),
            ("Multiple   Spaces", "multiple-spaces"),
        ],
    )
    def test_converts(self, value, expected):
        assert to_kebab_case(value) == expected


class TestDotCase:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("first name", "first.name"),
            ("user_id", "user.id"),
            ("SCREEN_NAME", "screen.name"),
            ("mobile-number", "mobile.number"),
        ],
    )
    def test_converts(self, value, expected):
        assert to_dot_case(value) == expected


class TestInvalidInput:
    """Every helper rejects the same inputs with the same messages."""

    CONVERTERS = [to_camel_case, to_kebab_case, to_dot_case]

    @pytest.mark.parametrize("convert", CONVERTERS)
    def test_none(self, convert):
        with pytest.raises(ValidationError, match="Input cannot be None"):
            convert(None)

    @pytest.mark.parametrize("convert", CONVERTERS)
    @pytest.mark.parametrize("value", [42, 3.5, ["first", "name"], b"first name"])
    def test_not_a_string(self, convert, value):
        with pytest.raises(ValidationError, match="Input must be a string"):
            convert(value)

    @pytest.mark.parametrize("convert", CONVERTERS)
    @pytest.mark.parametrize("value", ["82&*)73", "first.name", "hello!", ""])
    def test_invalid_characters(self, convert, value):
        with pytest.raises(ValidationError, match="Input contains invalid characters"):
            convert(value)

    @pytest.mark.parametrize("convert", CONVERTERS)
    @pytest.mark.parametrize("value", ["a\x1cb", "a\x1fb", "a\x85b"])
    def test_control_separators_are_invalid(self, convert, value):
        """str.isspace() counts these as whitespace; they are still rejected."""
        with pytest.raises(ValidationError, match="Input contains invalid characters"):
            convert(value)

    @pytest.mark.parametrize("convert", CONVERTERS)
    @pytest.mark.parametrize("value", ["   ", "---", "_ - _"])
    def test_no_words(self, convert, value):
        with pytest.raises(ValidationError, match="Input must contain at least one word"):
            convert(value)

    def test_error_names_the_field(self):
        with pytest.raises(ValidationError) as exc_info:
            split_words("a&b")

        assert exc_info.value.field == "value"
