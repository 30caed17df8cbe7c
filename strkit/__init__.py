"""C-library style string helpers: strtol-family parsing, ASCII case mapping, trimming, base conversion, wide-character encoding and errno messages."""

__version__ = "0.1.0"
__all__ = ["digits", "errors", "multibyte", "strtol", "text"]