"""Decoding of Japanese-encoded (ISO-2022-JP, EUC-JP) and MIME mail."""

from .config import AppConfig, ConfigLoader, DecoderConfig
from .models import Address, HeaderMap, MessageHandle
from .services import (
    BodyDecoder,
    MailMessage,
    SubjectDecoder,
    decode_body,
    decode_subject,
    parse_address_list,
    read_message,
)
from .services.decoding import (
    AddressParseError,
    DecodeError,
    MediaTypeParseError,
    MultipartReadError,
    NoTextPartFound,
    TranscodeError,
    TransferEncodingError,
)

__all__ = [
    "Address",
    "AddressParseError",
    "AppConfig",
    "BodyDecoder",
    "ConfigLoader",
    "DecodeError",
    "DecoderConfig",
    "HeaderMap",
    "MailMessage",
    "MediaTypeParseError",
    "MessageHandle",
    "MultipartReadError",
    "NoTextPartFound",
    "SubjectDecoder",
    "TranscodeError",
    "TransferEncodingError",
    "decode_body",
    "decode_subject",
    "parse_address_list",
    "read_message",
]
