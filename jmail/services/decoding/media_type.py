"""Strict Content-Type parsing."""

from email.policy import default

from jmail.models.media_type import MediaType

from .base import MediaTypeParseError


def parse_media_type(value: str) -> MediaType:
    """
    Parse a Content-Type value into its media type and parameters.

    Uses the standard library header registry and treats every defect it
    records as a syntax error.

    Args:
        value: Content-Type header value, folding already resolved

    Returns:
        MediaType with lower-cased type and parameter names

    Raises:
        MediaTypeParseError: If the value is empty or malformed

    Examples:
        >>> parse_media_type('Multipart/Mixed; Boundary="b1"')
        MediaType(type='multipart/mixed', params={'boundary': 'b1'})
    """
    if not value or not value.strip():
        raise MediaTypeParseError("No media type")

    header = default.header_factory("Content-Type", value)
    if header.defects:
        details = "; ".join(str(defect) for defect in header.defects)
        raise MediaTypeParseError(f"Malformed Content-Type {value!r}: {details}")

    return MediaType(
        type=header.content_type,
        params={name.lower(): param for name, param in header.params.items()},
    )
