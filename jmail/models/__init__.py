"""Data models for decoded mail"""

from .address import Address
from .encoded_word import EncodedWordKind
from .media_type import MediaType
from .message_handle import HeaderMap, MessageHandle, unfold_header

__all__ = [
    "Address",
    "EncodedWordKind",
    "HeaderMap",
    "MediaType",
    "MessageHandle",
    "unfold_header",
]
