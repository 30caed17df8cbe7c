"""Encoding a single wide character to multibyte form."""

from __future__ import annotations


def wctomb(wc: int, mb_cur_max: int = 4) -> bytes:
    """Encode the code point ``wc`` as UTF-8 bytes.

    With ``mb_cur_max`` of 1 only single-byte values below 0x100 are
    accepted. Values that cannot be encoded raise ``ValueError``.
    """
    code = wc & 0xFFFFFFFF
    if code < 0x80:
        return bytes([code])
    if mb_cur_max == 1:
        if code < 0x100:
            return bytes([code])
        raise ValueError(f"cannot encode {wc:#x} in a single byte")
    if code < 0x800:
        return bytes([0xC0 | (code >> 6), 0x80 | (code & 0x3F)])
    if code < 0x10000:
        return bytes(
            [0xE0 | (code >> 12), 0x80 | ((code >> 6) & 0x3F), 0x80 | (code & 0x3F)]
        )
    if code < 0x110000:
        return bytes(
            [
                0xF0 | (code >> 18),
                0x80 | ((code >> 12) & 0x3F),
                0x80 | ((code >> 6) & 0x3F),
                0x80 | (code & 0x3F),
            ]
        )
    raise ValueError(f"code point out of range: {wc:#x}")