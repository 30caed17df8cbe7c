"""ASCII case conversion and character trimming."""

from __future__ import annotations

import string

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_lower(text: str) -> str:
    """Return ``text`` with ASCII capital letters turned to lower case."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Return ``text`` with ASCII small letters turned to upper case."""
    return text.translate(_TO_UPPER)


def trim(text: str, trim_chars: str) -> str:
    """Remove any of ``trim_chars`` from both ends of ``text``."""
    if not isinstance(trim_chars, str):
        raise TypeError("trim_chars must be a string")
    return text.strip(trim_chars)