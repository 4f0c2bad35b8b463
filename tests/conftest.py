"""Shared fixtures for building raw test messages."""

import base64
import quopri
from typing import List, Sequence, Tuple

import pytest

from jmail.models.message_handle import MessageHandle

Headers = Sequence[Tuple[str, str]]

JAPANESE_PHRASE = "日本語のメール"


def build_message(headers: Headers, body: bytes) -> bytes:
    """Join header fields and a body into raw CRLF message bytes."""
    lines = [f"{name}: {value}".encode("ascii") for name, value in headers]
    return b"\r\n".join(lines) + b"\r\n\r\n" + body


def build_multipart(boundary: str, parts: List[bytes], close: bool = True) -> bytes:
    """Join already built parts into a multipart body."""
    delimiter = f"--{boundary}".encode("ascii")
    chunks = [b"This is a multi-part message in MIME format.\r\n"]
    for part in parts:
        chunks.append(delimiter + b"\r\n" + part + b"\r\n")
    if close:
        chunks.append(delimiter + b"--\r\n")
    return b"".join(chunks)


def iso2022jp(text: str) -> bytes:
    return text.encode("iso2022_jp")


def b64(data: bytes) -> bytes:
    return base64.b64encode(data)


def qp(data: bytes) -> bytes:
    return quopri.encodestring(data)


@pytest.fixture
def make_handle():
    """Build a MessageHandle from headers and a body."""

    def _make(headers: Headers, body: bytes = b"") -> MessageHandle:
        return MessageHandle.from_bytes(build_message(headers, body))

    return _make


@pytest.fixture
def alternative_message():
    """multipart/alternative with text/plain first and text/html second."""
    plain = build_message(
        [("Content-Type", "text/plain; charset=utf-8"), ("Content-Transfer-Encoding", "8bit")],
        "プレーンテキスト".encode("utf-8"),
    )
    html = build_message(
        [("Content-Type", "text/html; charset=utf-8")],
        b"<p>HTML body</p>",
    )
    body = build_multipart("alt-boundary", [plain, html])
    return build_message(
        [
            ("From", "sender@example.jp"),
            ("Subject", "alternative"),
            ("MIME-Version", "1.0"),
            ("Content-Type", 'multipart/alternative; boundary="alt-boundary"'),
        ],
        body,
    )


@pytest.fixture
def japanese_message():
    """Legacy ISO-2022-JP message: encoded From and Subject, 7bit JIS body."""
    subject = "=?ISO-2022-JP?B?" + b64(iso2022jp("会議のお知らせ")).decode("ascii") + "?="
    sender = "=?ISO-2022-JP?B?" + b64(iso2022jp("山田太郎")).decode("ascii") + "?= <taro@example.jp>"
    return build_message(
        [
            ("From", sender),
            ("To", "hanako@example.jp, jiro@example.jp"),
            ("Subject", subject),
            ("Message-ID", "<jis-0001@example.jp>"),
            ("MIME-Version", "1.0"),
            ("Content-Type", "text/plain; charset=ISO-2022-JP"),
            ("Content-Transfer-Encoding", "7bit"),
        ],
        iso2022jp(JAPANESE_PHRASE) + b"\r\n",
    )
