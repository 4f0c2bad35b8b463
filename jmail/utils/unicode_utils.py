"""Unicode and email header decoding utilities."""

from email.header import decode_header
from typing import Optional

from jmail.config.decoder_config import CharsetConfig

from .charset_utils import lookup_codec


def decode_email_header(header_value: Optional[str], charsets: Optional[CharsetConfig] = None) -> str:
    """
    Decode RFC 2047 encoded words in a header fragment to a Unicode string.

    Only utf-8, us-ascii, iso-8859-1, iso-2022-jp and euc-jp words are
    accepted.

    Args:
        header_value: Raw header value (may be encoded)
        charsets: Codec overrides for the Japanese charsets

    Returns:
        Decoded Unicode string

    Raises:
        LookupError: If an encoded word uses an unsupported charset
        UnicodeDecodeError: If an encoded word is not valid in its charset

    Examples:
        >>> decode_email_header("=?UTF-8?B?5Lit5paH?=")
        '中文'
        >>> decode_email_header("=?ISO-2022-JP?B?GyRCRnxLXDhsGyhC?=")
        '日本語'
    """
    if not header_value:
        return ""

    decoded_parts = []
    for content, encoding in decode_header(header_value):
        if isinstance(content, bytes):
            if encoding:
                codec = lookup_codec(encoding, charsets)
                if codec is None:
                    raise LookupError(f"Unknown charset: {encoding}")
                decoded_parts.append(content.decode(codec))
            else:
                # Unencoded run, try ASCII then UTF-8
                try:
                    decoded_parts.append(content.decode("ascii"))
                except UnicodeDecodeError:
                    decoded_parts.append(content.decode("utf-8", errors="replace"))
        else:
            decoded_parts.append(str(content))

    return "".join(decoded_parts)
