"""RFC 2047 decoding of the Subject header."""

import logging
from typing import Optional

from jmail.config.decoder_config import DecoderConfig
from jmail.models.encoded_word import (
    ENCODED_WORD_INTRODUCER,
    ENCODED_WORD_TERMINATOR,
    EncodedWordKind,
)

from .base import DecodeError
from .transcoding import decode_base64, decode_charset, decode_quoted_printable

logger = logging.getLogger(__name__)


class SubjectDecoder:
    """
    Decode a raw Subject value made of plain tokens and encoded words.

    Only ISO-2022-JP and UTF-8 words in base64 or quoted-printable are
    understood. Other encoded words, and words whose payload does not
    decode, contribute nothing. Decoding never raises.
    """

    def __init__(self, config: Optional[DecoderConfig] = None, log: Optional[logging.Logger] = None):
        """
        Initialize decoder.

        Args:
            config: Codec settings for the Japanese charsets
            log: Logger for skipped words (default: module logger)
        """
        self.config = config or DecoderConfig()
        self.log = log or logger

    def decode(self, raw: Optional[str]) -> str:
        """
        Decode a Subject header value.

        Args:
            raw: Header value, folding resolved or not

        Returns:
            Decoded subject. Plain tokens are joined by single spaces;
            adjacent encoded words are concatenated without one.
        """
        if not raw:
            return ""

        pieces = []
        previous_plain = False
        for token in raw.split():
            if not token.startswith(ENCODED_WORD_INTRODUCER):
                if pieces:
                    pieces.append(" ")
                pieces.append(token)
                previous_plain = True
                continue

            kind = EncodedWordKind.classify(token)
            if kind is EncodedWordKind.UNSUPPORTED:
                self.log.debug("Skipping unsupported encoded word: %s", token)
                continue

            text = self._decode_word(token, kind)
            if not text:
                continue
            if previous_plain:
                pieces.append(" ")
            pieces.append(text)
            previous_plain = False

        return "".join(pieces)

    def _decode_word(self, token: str, kind: EncodedWordKind) -> str:
        start = len(kind.prefix)
        end = token.rfind(ENCODED_WORD_TERMINATOR)
        if end < start:
            self.log.debug("Encoded word is not terminated: %s", token)
            return ""

        payload = token[start:end]
        try:
            if kind.is_base64:
                data = decode_base64(payload, strict=True)
            else:
                data = decode_quoted_printable(payload.encode("ascii"))
            return decode_charset(data, kind.charset, self.config)
        except UnicodeEncodeError:
            self.log.debug("Encoded word has non-ASCII payload: %s", token)
        except DecodeError as e:
            self.log.debug("Cannot decode %s: %s", token, e)
        return ""


def decode_subject(
    raw: Optional[str],
    config: Optional[DecoderConfig] = None,
    log: Optional[logging.Logger] = None,
) -> str:
    """Decode a raw Subject header value; see SubjectDecoder."""
    return SubjectDecoder(config, log).decode(raw)
