"""Selection and decoding of the readable text part of a message."""

import logging
from typing import Optional

from jmail.config.decoder_config import DecoderConfig
from jmail.models.media_type import TEXT_PREFIX, MediaType
from jmail.models.message_handle import MessageHandle

from .base import DecodeError, MediaTypeParseError, MultipartReadError, NoTextPartFound
from .leaf_decoder import decode_leaf
from .media_type import parse_media_type
from .multipart_reader import MultipartReader

logger = logging.getLogger(__name__)


def _is_leaf(content_type: str) -> bool:
    return not content_type or content_type.strip().lower().startswith(TEXT_PREFIX)


class BodyDecoder:
    """
    Find the first text part of a message, depth first, and decode it.

    For multipart/alternative this prefers the first alternative
    (normally text/plain over text/html). For multipart/mixed the first
    text leaf anywhere in the tree wins.
    """

    def __init__(self, config: Optional[DecoderConfig] = None, log: Optional[logging.Logger] = None):
        """
        Initialize decoder.

        Args:
            config: Output encoding, codecs and error policy
            log: Logger for abandoned branches (default: module logger)
        """
        self.config = config or DecoderConfig()
        self.log = log or logger

    def decode(self, handle: MessageHandle) -> bytes:
        """
        Decode the body of a message.

        Args:
            handle: Parsed message; its streams are consumed

        Returns:
            Decoded bytes of the selected text part

        Raises:
            NoTextPartFound: If no branch holds a text part
            MediaTypeParseError: If any visited Content-Type is malformed
            MultipartReadError: If the top-level multipart cannot be read
            TranscodeError: If a top-level text body has invalid charset data
            TransferEncodingError: If a top-level base64 or quoted-printable body is invalid
        """
        return self._get_text(handle, depth=0)

    def _get_text(self, part: MessageHandle, depth: int) -> bytes:
        content_type = part.header.get("Content-Type")
        if _is_leaf(content_type):
            return decode_leaf(part.header, part.body, self.config, self.log)

        media_type = parse_media_type(content_type)
        self.log.debug("MediaType: %s %s (depth %d)", media_type.type, media_type.params, depth)
        return self._read_multipart(part, media_type, depth)

    def _read_multipart(self, part: MessageHandle, media_type: MediaType, depth: int) -> bytes:
        if not media_type.is_multipart:
            raise NoTextPartFound(f"{media_type.type} part holds no text")
        if not media_type.boundary:
            raise MultipartReadError(f"{media_type.type} has no boundary parameter")

        for index, child in enumerate(MultipartReader(part, media_type.boundary)):
            child_type = child.header.get("Content-Type")
            if child_type:
                # Malformed sub-part headers abort the whole decode
                self.log.debug("MediaType-inner: %s", parse_media_type(child_type).type)

            try:
                return self._get_text(child, depth + 1)
            except NoTextPartFound as e:
                self.log.warning("No text in part %d at depth %d: %s", index, depth + 1, e)
            except MediaTypeParseError:
                raise
            except DecodeError as e:
                self.log.warning("Skipping part %d at depth %d: %s", index, depth + 1, e)

        raise NoTextPartFound(f"No text part in {media_type.type}")


def decode_body(
    handle: MessageHandle,
    config: Optional[DecoderConfig] = None,
    log: Optional[logging.Logger] = None,
) -> bytes:
    """Decode the body of a parsed message; see BodyDecoder."""
    return BodyDecoder(config, log).decode(handle)
