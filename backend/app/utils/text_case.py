"""
Anythink Market Backend — Text Case Conversion
===============================================

What:  Pure helpers turning identifiers like "first name", "user_id" or
       "SCREEN_NAME" into camelCase, kebab-case or dot.case.
How:   Every helper validates its input the same way, splits it into
       lowercase words and joins them in its own style.

Accepted input:
    letters, digits, whitespace, hyphens and underscores, with at least one
    word once separators are stripped. Anything else raises ValidationError;
    no helper ever returns a partial transform.

Examples:
    to_camel_case("first name")      → "firstName"
    to_camel_case("SCREEN_NAME")     → "screenName"
    to_kebab_case("Hello World")     → "hello-world"
    to_dot_case("mobile-number")     → "mobile.number"
"""

import re
from typing import Any, List

from app.exceptions import ValidationError

# ECMAScript whitespace. Python's \s also matches \x1c-\x1f and \x85, which are rejected here.
_WHITESPACE = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

_ALLOWED = re.compile(f"[A-Za-z0-9{_WHITESPACE}\\-_]+")
_SEPARATORS = re.compile(f"[{_WHITESPACE}\\-_]+")


def split_words(value: Any) -> List[str]:
    """
    Validate `value` and return its lowercase words.

    Raises:
        ValidationError: None, not a str, disallowed characters, or no words
    """
    if value is None:
        raise ValidationError(message="Input cannot be None", field="value")

    if not isinstance(value, str):
        raise ValidationError(
            message="Input must be a string",
            field="value",
            context={"type": type(value).__name__},
        )

    if not _ALLOWED.fullmatch(value):
        raise ValidationError(message="Input contains invalid characters", field="value")

    words = [word.lower() for word in _SEPARATORS.split(value) if word]
    if not words:
        raise ValidationError(message="Input must contain at least one word", field="value")

    return words


def to_camel_case(value: Any) -> str:
    """'first name' → 'firstName'."""
    first, *rest = split_words(value)
    return first + "".join(word[:1].upper() + word[1:] for word in rest)


def to_kebab_case(value: Any) -> str:
    """'Hello World' → 'hello-world'."""
    return "-".join(split_words(value))


def to_dot_case(value: Any) -> str:
    """'SCREEN_NAME' → 'screen.name'."""
    return ".".join(split_words(value))
