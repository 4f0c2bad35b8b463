"""Transfer-encoding and charset decoding of a single text part."""

import logging
from enum import Enum
from typing import BinaryIO, Optional

from jmail.config.decoder_config import DecoderConfig
from jmail.models.message_handle import HeaderMap
from jmail.utils.charset_utils import ISO2022JP

from .base import MediaTypeParseError
from .media_type import parse_media_type
from .transcoding import decode_base64, decode_quoted_printable, transcode

logger = logging.getLogger(__name__)

ENC_QUOTED_PRINTABLE = "quoted-printable"
ENC_BASE64 = "base64"


class LeafTransform(Enum):
    """Decoding steps applied to a text part's raw body."""

    QUOTED_PRINTABLE_ISO2022JP = "quoted-printable+iso-2022-jp"
    QUOTED_PRINTABLE = "quoted-printable"
    # Not transcoded, even for ISO-2022-JP text
    BASE64 = "base64"
    ISO2022JP = "iso-2022-jp"
    PASSTHROUGH = "passthrough"


def _leaf_charset(content_type: str, log: logging.Logger) -> Optional[str]:
    if not content_type:
        return None
    try:
        return parse_media_type(content_type).charset
    except MediaTypeParseError as e:
        log.debug("Ignoring unparsable leaf Content-Type: %s", e)
        return None


def select_leaf_transform(header: HeaderMap, log: Optional[logging.Logger] = None) -> LeafTransform:
    """
    Choose how to decode a text or untyped part from its headers.

    Content-Transfer-Encoding takes priority over the charset parameter.
    A missing Content-Type is treated as a hint that the body is
    ISO-2022-JP.
    """
    log = log or logger
    content_type = header.get("Content-Type")
    encoding = header.get("Content-Transfer-Encoding").strip().lower()
    charset = _leaf_charset(content_type, log)

    if encoding == ENC_QUOTED_PRINTABLE:
        if charset == ISO2022JP:
            return LeafTransform.QUOTED_PRINTABLE_ISO2022JP
        return LeafTransform.QUOTED_PRINTABLE
    if encoding == ENC_BASE64:
        return LeafTransform.BASE64
    if not content_type or charset == ISO2022JP:
        return LeafTransform.ISO2022JP
    return LeafTransform.PASSTHROUGH


def decode_leaf(
    header: HeaderMap,
    body: BinaryIO,
    config: Optional[DecoderConfig] = None,
    log: Optional[logging.Logger] = None,
) -> bytes:
    """
    Undo the transfer encoding and charset of a text part.

    Args:
        header: Headers of the part
        body: Raw body stream of the part, read to the end
        config: Output encoding, codecs and error policy
        log: Logger to report the chosen transform to

    Returns:
        Decoded body bytes

    Raises:
        TransferEncodingError: If a base64 or quoted-printable body is invalid
        TranscodeError: If ISO-2022-JP bytes are invalid
    """
    config = config or DecoderConfig()
    log = log or logger
    transform = select_leaf_transform(header, log)
    log.debug("Leaf transform: %s", transform.value)

    raw = body.read()
    if transform is LeafTransform.QUOTED_PRINTABLE_ISO2022JP:
        return transcode(decode_quoted_printable(raw), ISO2022JP, config)
    if transform is LeafTransform.QUOTED_PRINTABLE:
        return decode_quoted_printable(raw)
    if transform is LeafTransform.BASE64:
        return decode_base64(raw)
    if transform is LeafTransform.ISO2022JP:
        return transcode(raw, ISO2022JP, config)
    return raw
