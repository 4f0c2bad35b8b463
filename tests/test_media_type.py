"""Tests for Content-Type parsing and multipart reading."""

import pytest

from conftest import build_message, build_multipart
from jmail.models.media_type import MediaType
from jmail.models.message_handle import MessageHandle
from jmail.services.decoding.base import MediaTypeParseError, MultipartReadError
from jmail.services.decoding.media_type import parse_media_type
from jmail.services.decoding.multipart_reader import MultipartReader


class TestParseMediaType:
    """Test strict media type parsing."""

    def test_parse_text_with_charset(self):
        media_type = parse_media_type('Text/Plain; Charset="ISO-2022-JP"')

        assert media_type.type == "text/plain"
        assert media_type.is_text
        assert media_type.charset == "iso-2022-jp"

    def test_parse_multipart_boundary_keeps_case(self):
        media_type = parse_media_type('multipart/mixed; boundary="----=_Part_0_ABC.123"')

        assert media_type.is_multipart
        assert media_type.boundary == "----=_Part_0_ABC.123"

    def test_parse_unquoted_parameters(self):
        media_type = parse_media_type("multipart/alternative; boundary=abc123; charset=utf-8")
        assert media_type.params == {"boundary": "abc123", "charset": "utf-8"}

    def test_no_parameters(self):
        media_type = parse_media_type("application/octet-stream")

        assert media_type == MediaType("application/octet-stream", {})
        assert media_type.charset is None
        assert media_type.boundary is None

    @pytest.mark.parametrize("value", ["", "   ", "text", "application"])
    def test_malformed_values(self, value):
        with pytest.raises(MediaTypeParseError):
            parse_media_type(value)


def multipart(boundary: str, parts, close: bool = True) -> MessageHandle:
    raw = build_message(
        [("Content-Type", f'multipart/mixed; boundary="{boundary}"')],
        build_multipart(boundary, parts, close=close),
    )
    return MessageHandle.from_bytes(raw)


class TestMultipartReader:
    """Test iteration over multipart children."""

    def test_parts_in_stream_order(self):
        handle = multipart(
            "b1",
            [
                build_message([("Content-Type", "text/plain")], b"first"),
                build_message([("Content-Type", "text/html")], b"second"),
            ],
        )
        parts = list(MultipartReader(handle, "b1"))

        assert [part.header.get("Content-Type") for part in parts] == ["text/plain", "text/html"]
        assert parts[0].body.read() == b"first"

    def test_empty_boundary(self):
        handle = multipart("b1", [build_message([], b"x")])
        with pytest.raises(MultipartReadError):
            MultipartReader(handle, "")

    def test_boundary_mismatch(self):
        handle = multipart("b1", [build_message([], b"x")])
        with pytest.raises(MultipartReadError):
            list(MultipartReader(handle, "other"))

    def test_missing_close_boundary_raises_after_last_part(self):
        handle = multipart("b1", [build_message([("Content-Type", "text/plain")], b"only")], close=False)
        reader = iter(MultipartReader(handle, "b1"))

        last = next(reader)
        assert last.header.get("Content-Type") == "text/plain"
        assert last.body.read() == b"only"
        with pytest.raises(MultipartReadError):
            next(reader)

    def test_multipart_body_is_not_a_stream(self):
        handle = multipart("b1", [build_message([], b"x")])
        with pytest.raises(ValueError):
            handle.body

    def test_only_last_unterminated_part_is_trimmed(self):
        handle = multipart(
            "b1",
            [
                build_message([("Content-Type", "text/plain")], b"first"),
                build_message([("Content-Type", "text/plain")], b"second"),
            ],
            close=False,
        )
        reader = iter(MultipartReader(handle, "b1"))
        first, second = next(reader), next(reader)

        assert not first.unterminated
        assert second.unterminated
        assert first.body.read() == b"first"
        assert second.body.read() == b"second"
