# strkit

Small helpers with no dependencies that behave like their counterparts in the C
standard library. They return Python values and raise Python exceptions.

## Installation

```
pip install strkit
```

## Modules

### `strkit.strtol`

`strtol`, `strtoll`, `strtoul` and `strtoull` take `(text, base=10)`.
`str_to_integer` and `str_to_unsigned` take `(text, width, base)`, where
`width` is the most characters to read once leading whitespace has been skipped.

Parsing follows the C rules:

- leading C whitespace is skipped;
- an optional `+` or `-` sign is read;
- with base 0 or 16, a `0x`/`0X` prefix selects hexadecimal;
- with base 0, a leading `0` selects octal and anything else selects decimal.

Each call returns a frozen `ParseResult` with these fields:

- `value`: the parsed integer.
- `end`: the index just past the characters that were consumed.
- `out_of_range`: true when the value saturated. Signed values become
  `LLONG_MIN` or `LLONG_MAX`; unsigned values become `ULLONG_MAX`.
- `invalid`: true when the first character after the sign is not a digit of
  the base.

With the unsigned functions, a leading minus sign negates the value modulo
2**64.

A base below 0, above 36, or equal to 1 raises `ConversionError`, which is a
subclass of `ValueError`.

### `strkit.text`

- `to_lower(text)` and `to_upper(text)` change only the ASCII letters.
- `trim(text, trim_chars)` removes any of `trim_chars` from both ends of
  `text`. It raises `TypeError` if `trim_chars` is not a string.

### `strkit.digits`

`ullitoa_base(n, base, digits=DEFAULT_DIGITS)` writes the unsigned 64-bit `n`
in `base`, using the characters of `digits`.

- A base of 0 gives an empty string.
- A value outside the unsigned 64-bit range raises `ValueError`.
- A negative base raises `ValueError`.

### `strkit.multibyte`

`wctomb(wc, mb_cur_max=4)` encodes one code point as UTF-8 bytes. When
`mb_cur_max` is 1, only values below 0x100 are accepted, and each is written
as a single byte. A value that cannot be encoded raises `ValueError`.

### `strkit.errors`

`error_message(errnum, platform=None)` returns the text that glibc, musl or
macOS gives for an errno value. `error_table(platform=None)` returns the whole
table of messages.

`platform` may be a `Platform` member (`GLIBC`, `MUSL`, `APPLE`) or its string
value. When it is omitted, the running system is detected.

For numbers outside the table:

- glibc gives `"Unknown error N"`;
- macOS gives `"Unknown error: N"`;
- musl gives `"No error information"`.

## Example

```python
from strkit.strtol import strtol
from strkit.text import trim, to_upper
from strkit.digits import ullitoa_base
from strkit.multibyte import wctomb
from strkit.errors import Platform, error_message

result = strtol("  0x1fz", 0)
print(result.value, result.end)   # 31 6

print(trim("--hello--", "-"))     # hello
print(to_upper("abc"))            # ABC
print(ullitoa_base(255, 16, "0123456789abcdef"))  # ff
print(wctomb(0x3C6, 6))           # b'\xcf\x86'
print(error_message(2, Platform.GLIBC))  # No such file or directory
```

## What it does not do

This is a library only. It has no command-line tool. It offers no formatted
output or input in the style of `printf` and `scanf`.

## Running the tests

```
pip install -e ".[test]"
pytest
```