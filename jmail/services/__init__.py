"""Decoding services"""

from .address_parser import parse_address_list
from .decoding import (
    BodyDecoder,
    MultipartReader,
    SubjectDecoder,
    decode_body,
    decode_leaf,
    decode_subject,
    parse_media_type,
)
from .mail_message import MailMessage, read_message

__all__ = [
    "BodyDecoder",
    "MailMessage",
    "MultipartReader",
    "SubjectDecoder",
    "decode_body",
    "decode_leaf",
    "decode_subject",
    "parse_address_list",
    "parse_media_type",
    "read_message",
]
