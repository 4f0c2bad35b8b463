"""Subject and body decoding services."""

from .base import (
    AddressParseError,
    DecodeError,
    MediaTypeParseError,
    MultipartReadError,
    NoTextPartFound,
    TranscodeError,
    TransferEncodingError,
)
from .body_decoder import BodyDecoder, decode_body
from .leaf_decoder import LeafTransform, decode_leaf, select_leaf_transform
from .media_type import parse_media_type
from .multipart_reader import MultipartReader
from .subject_decoder import SubjectDecoder, decode_subject

__all__ = [
    "AddressParseError",
    "BodyDecoder",
    "DecodeError",
    "LeafTransform",
    "MediaTypeParseError",
    "MultipartReadError",
    "MultipartReader",
    "NoTextPartFound",
    "SubjectDecoder",
    "TranscodeError",
    "TransferEncodingError",
    "decode_body",
    "decode_leaf",
    "decode_subject",
    "parse_media_type",
    "select_leaf_transform",
]
