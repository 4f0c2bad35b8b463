"""Mapping of MIME charset names to Python codecs."""

from typing import Optional

from jmail.config.decoder_config import CharsetConfig

ISO2022JP = "iso-2022-jp"
EUCJP = "euc-jp"
UTF8 = "utf-8"

# Charsets every decoder understands without configuration
_NATIVE_CODECS = {
    "utf-8": "utf-8",
    "utf8": "utf-8",
    "us-ascii": "ascii",
    "ascii": "ascii",
    "iso-8859-1": "latin-1",
    "latin1": "latin-1",
}


def normalize_charset(charset: Optional[str]) -> str:
    """Lower-case and strip a charset label; ``None`` becomes ``""``."""
    return (charset or "").strip().lower()


def lookup_codec(charset: Optional[str], charsets: Optional[CharsetConfig] = None) -> Optional[str]:
    """
    Resolve a MIME charset label to the Python codec used to decode it.

    Args:
        charset: Charset label as found in a header (any case)
        charsets: Codec overrides for the Japanese charsets

    Returns:
        Codec name, or None if the charset is not supported

    Examples:
        >>> lookup_codec("ISO-2022-JP")
        'iso2022_jp_ext'
        >>> lookup_codec("koi8-r") is None
        True
    """
    charsets = charsets or CharsetConfig()
    label = normalize_charset(charset)

    if label == ISO2022JP:
        return charsets.iso2022jp_codec
    if label == EUCJP:
        return charsets.eucjp_codec
    return _NATIVE_CODECS.get(label)
