"""Rendering unsigned integers in an arbitrary base."""

from __future__ import annotations

DEFAULT_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_ULLONG_MAX = 2**64 - 1


def ullitoa_base(n: int, base: int, digits: str = DEFAULT_DIGITS) -> str:
    """Write the unsigned 64-bit ``n`` in ``base`` using ``digits``.

    A base of zero yields an empty string.
    """
    if not 0 <= n <= _ULLONG_MAX:
        raise ValueError(f"value out of unsigned 64-bit range: {n}")
    if base < 0:
        raise ValueError(f"negative base: {base}")
    if base == 0:
        return ""
    if n == 0:
        return digits[0]
    if base == 1:
        return digits[0] * n
    out = []
    while n:
        n, rem = divmod(n, base)
        out.append(digits[rem])
    return "".join(reversed(out))