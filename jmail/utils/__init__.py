"""Utility functions"""

from .charset_utils import ISO2022JP, EUCJP, UTF8, lookup_codec, normalize_charset
from .unicode_utils import decode_email_header

__all__ = [
    "ISO2022JP",
    "EUCJP",
    "UTF8",
    "decode_email_header",
    "lookup_codec",
    "normalize_charset",
]
