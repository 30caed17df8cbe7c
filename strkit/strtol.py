"""String to integer conversion in the manner of the C ``strto*`` family."""

from __future__ import annotations

from dataclasses import dataclass, replace

LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1
LONG_MIN = LLONG_MIN
LONG_MAX = LLONG_MAX
ULLONG_MAX = 2**64 - 1
ULONG_MAX = ULLONG_MAX
INT_MAX = 2**31 - 1

_C_SPACE = frozenset(" \t\n\v\f\r")
_NOT_A_DIGIT = 255


class ConversionError(ValueError):
    """Raised when a conversion is requested with an unsupported base."""


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a conversion.

    ``end`` is the index in the text just past the consumed characters.
    ``out_of_range`` marks a saturated value; ``invalid`` marks text whose
    first character after the optional sign was not a digit of the base.
    """

    value: int
    end: int
    out_of_range: bool = False
    invalid: bool = False


def _digit(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    return _NOT_A_DIGIT


class _Cursor:
    """Walks a string as if it were NUL-terminated."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def char(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else "\0"

    @property
    def digit(self) -> int:
        return _digit(self.char)

    def advance(self) -> None:
        self.pos += 1


@dataclass
class _Prefix:
    cursor: _Cursor
    width: int
    base: int
    negative: bool
    invalid: bool


def _check_base(base: int) -> None:
    if base < 0 or base > 36 or base == 1:
        raise ConversionError(f"unsupported base: {base}")


def _scan_prefix(text: str, width: int, base: int) -> _Prefix:
    cur = _Cursor(text)
    negative = False
    invalid = False
    while cur.char in _C_SPACE:
        cur.advance()
    if width > 0 and cur.char in "+-":
        negative = cur.char == "-"
        cur.advance()
        width -= 1
    if width > 0 and base in (0, 16) and cur.char == "0":
        cur.advance()
        width -= 1
        if width > 0 and cur.char in "xX":
            cur.advance()
            width -= 1
            base = 16
        elif base == 0:
            base = 8
    elif width > 0:
        if base == 0:
            base = 10
        if cur.digit >= base:
            invalid = True
    return _Prefix(cur, width, base, negative, invalid)


def _skip_remaining_digits(cur: _Cursor, base: int) -> None:
    while cur.digit < base:
        cur.advance()


def str_to_integer(text: str, width: int = INT_MAX, base: int = 10) -> ParseResult:
    """Parse a signed 64-bit integer from at most ``width`` characters."""
    _check_base(base)
    p = _scan_prefix(text, width, base)
    cur, width, base = p.cursor, p.width, p.base
    n = 0
    if p.negative:
        while width > 0 and cur.digit < base:
            d = cur.digit
            if not (n >= -(-LLONG_MIN // base) and base * n >= LLONG_MIN + d):
                break
            n = n * base - d
            cur.advance()
            width -= 1
    else:
        while width > 0 and cur.digit < base:
            d = cur.digit
            if not (n <= LLONG_MAX // base and base * n <= LLONG_MAX - d):
                break
            n = n * base + d
            cur.advance()
            width -= 1
    out_of_range = False
    if width > 0 and cur.digit < base:
        _skip_remaining_digits(cur, base)
        out_of_range = True
        n = LLONG_MIN if p.negative else LLONG_MAX
    return ParseResult(n, cur.pos, out_of_range, p.invalid)


def strtoll(text: str, base: int = 10) -> ParseResult:
    """Parse a ``long long`` value."""
    return str_to_integer(text, INT_MAX, base)


def strtol(text: str, base: int = 10) -> ParseResult:
    """Parse a ``long`` value, clamped to the ``long`` range."""
    result = str_to_integer(text, INT_MAX, base)
    clamped = min(max(result.value, LONG_MIN), LONG_MAX)
    return replace(result, value=clamped)


def str_to_unsigned(text: str, width: int = INT_MAX, base: int = 10) -> ParseResult:
    """Parse an unsigned 64-bit integer from at most ``width`` characters.

    A leading minus sign negates the value modulo 2**64.
    """
    _check_base(base)
    p = _scan_prefix(text, width, base)
    cur, width, base = p.cursor, p.width, p.base
    negative = p.negative
    n = 0
    while width > 0 and cur.digit < base:
        d = cur.digit
        if not (n <= ULLONG_MAX // base and base * n <= ULLONG_MAX - d):
            break
        n = n * base + d
        cur.advance()
        width -= 1
    out_of_range = False
    if width > 0 and cur.digit < base:
        _skip_remaining_digits(cur, base)
        out_of_range = True
        n = ULLONG_MAX
        negative = False
    value = (-n) & ULLONG_MAX if negative else n
    return ParseResult(value, cur.pos, out_of_range, p.invalid)


def strtoull(text: str, base: int = 10) -> ParseResult:
    """Parse an ``unsigned long long`` value."""
    return str_to_unsigned(text, INT_MAX, base)


def strtoul(text: str, base: int = 10) -> ParseResult:
    """Parse an ``unsigned long`` value, clamped to its range."""
    result = str_to_unsigned(text, INT_MAX, base)
    return replace(result, value=min(result.value, ULONG_MAX))