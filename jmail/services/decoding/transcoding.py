"""Transfer-encoding and charset helpers shared by the decoders."""

import base64
import binascii
import quopri
import re
from typing import Optional

from jmail.config.decoder_config import DecoderConfig
from jmail.utils.charset_utils import lookup_codec

from .base import TranscodeError, TransferEncodingError

_LINE_BREAKS_RE = re.compile(rb"[\r\n]")

# "=" must start a hex escape or a soft line break
_BAD_QP_ESCAPE_RE = re.compile(rb"=(?![0-9A-Fa-f]{2}|\r?\n|\Z)")


def decode_base64(data: bytes, strict: bool = False) -> bytes:
    """
    Decode standard-alphabet base64.

    Args:
        data: Encoded bytes
        strict: Also reject line breaks; otherwise CR and LF are skipped

    Raises:
        TransferEncodingError: If the input holds characters outside the
            alphabet or has bad padding
    """
    if not strict:
        data = _LINE_BREAKS_RE.sub(b"", data)
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise TransferEncodingError(f"Invalid base64 data: {e}") from e


def decode_quoted_printable(data: bytes) -> bytes:
    """
    Decode quoted-printable.

    Raises:
        TransferEncodingError: If an "=" is followed by neither two hex
            digits nor a line break

    Examples:
        >>> decode_quoted_printable(b"caf=C3=A9")
        b'caf\\xc3\\xa9'
    """
    match = _BAD_QP_ESCAPE_RE.search(data)
    if match:
        raise TransferEncodingError(f"Invalid quoted-printable escape at offset {match.start()}")
    return quopri.decodestring(data)


def decode_charset(data: bytes, charset: str, config: Optional[DecoderConfig] = None) -> str:
    """
    Decode ``data`` from ``charset`` to text.

    Raises:
        TranscodeError: If the charset is unknown or the bytes are invalid
    """
    config = config or DecoderConfig()
    codec = lookup_codec(charset, config.charsets)
    if codec is None:
        raise TranscodeError(f"Unsupported charset: {charset}")
    try:
        return data.decode(codec, config.transcode_errors)
    except UnicodeDecodeError as e:
        raise TranscodeError(f"Invalid {charset} data: {e}") from e


def transcode(data: bytes, charset: str, config: Optional[DecoderConfig] = None) -> bytes:
    """Re-encode ``data`` from ``charset`` into the configured output encoding."""
    config = config or DecoderConfig()
    text = decode_charset(data, charset, config)
    try:
        return text.encode(config.output_encoding, config.transcode_errors)
    except UnicodeEncodeError as e:
        raise TranscodeError(f"Cannot encode text as {config.output_encoding}: {e}") from e
