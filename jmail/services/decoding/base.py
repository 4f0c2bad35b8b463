"""Exceptions raised by the subject and body decoders."""


class DecodeError(Exception):
    """Base exception for message decoding errors."""

    pass


class MediaTypeParseError(DecodeError):
    """Raised when a Content-Type value is malformed."""

    pass


class MultipartReadError(DecodeError):
    """Raised when the parts of a multipart node cannot be read."""

    pass


class NoTextPartFound(DecodeError, EOFError):
    """
    Raised when no text part exists in a message or branch.

    Also an EOFError: running out of parts and running out of stream are
    the same outcome for callers.
    """

    pass


class TranscodeError(DecodeError):
    """Raised when leaf bytes are not valid in their declared charset."""

    pass


class TransferEncodingError(DecodeError):
    """Raised when a base64 or quoted-printable payload cannot be decoded."""

    pass


class AddressParseError(DecodeError):
    """Raised when an address header cannot be parsed or decoded."""

    pass
