"""Message-level access to decoded subject, body and addresses."""

import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from jmail.config.decoder_config import DecoderConfig
from jmail.models.address import Address
from jmail.models.message_handle import MessageHandle

from .address_parser import parse_address_list
from .decoding.body_decoder import BodyDecoder
from .decoding.subject_decoder import SubjectDecoder


class MailMessage:
    """A parsed mail message whose Japanese-encoded parts can be decoded."""

    def __init__(
        self,
        handle: MessageHandle,
        config: Optional[DecoderConfig] = None,
        log: Optional[logging.Logger] = None,
    ):
        """
        Initialize message.

        Args:
            handle: Parsed message
            config: Decoder settings
            log: Logger injected into the decoders
        """
        self.handle = handle
        self.config = config or DecoderConfig()
        self.log = log

    @classmethod
    def from_file(
        cls,
        file_path: Path,
        config: Optional[DecoderConfig] = None,
        log: Optional[logging.Logger] = None,
    ) -> "MailMessage":
        """
        Read a message from an .eml file.

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        if not file_path.exists():
            raise FileNotFoundError(f"Email file not found: {file_path}")

        with open(file_path, "rb") as f:
            return read_message(f, config, log)

    def get_header(self, key: str) -> str:
        """Return the first raw value of header ``key`` ("" if absent)."""
        return self.handle.header.get(key)

    def decode_subject(self) -> str:
        return SubjectDecoder(self.config, self.log).decode(self.get_header("Subject"))

    def decode_body(self) -> bytes:
        """
        Decode the first text part of the message.

        Raises:
            DecodeError: See BodyDecoder.decode
        """
        return BodyDecoder(self.config, self.log).decode(self.handle)

    def get_from(self) -> List[Address]:
        return parse_address_list(self.get_header("From"), self.config.charsets)

    def get_to(self) -> List[Address]:
        return parse_address_list(self.get_header("To"), self.config.charsets)


def read_message(
    source: Union[bytes, BinaryIO],
    config: Optional[DecoderConfig] = None,
    log: Optional[logging.Logger] = None,
) -> MailMessage:
    """
    Parse raw message bytes or a binary file object.

    Args:
        source: RFC 5322 message as bytes, or a file opened in binary mode
        config: Decoder settings
        log: Logger injected into the decoders

    Returns:
        MailMessage over the parsed message
    """
    if isinstance(source, (bytes, bytearray)):
        handle = MessageHandle.from_bytes(bytes(source))
    else:
        handle = MessageHandle.from_binary_file(source)
    return MailMessage(handle, config, log)
