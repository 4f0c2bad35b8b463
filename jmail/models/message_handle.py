"""Header lookup and body stream over one parsed MIME node."""

import io
import re
from email import message_from_bytes
from email.message import Message
from email.policy import default
from typing import BinaryIO, Iterable, Iterator, List, Optional, Tuple

# CRLF (or bare LF) followed by WSP marks a folded header line
_FOLD_RE = re.compile(r"\r?\n(?=[ \t])")

# Line break left before a missing closing delimiter
_LAST_LINE_BREAK_RE = re.compile(rb"\r?\n\Z")

# get_payload(decode=True) undoes these itself
_SELF_DECODING_CTES = ("quoted-printable", "base64", "x-uuencode", "uuencode", "uue", "x-uue")


def unfold_header(value: str) -> str:
    """
    Resolve RFC 5322 folding in a raw header value.

    8-bit header bytes come out of the byte parser as surrogate escapes and
    are read back as UTF-8.

    Examples:
        >>> unfold_header("Hello\\r\\n world")
        'Hello world'
    """
    value = _FOLD_RE.sub("", value).rstrip("\r\n")
    try:
        value.encode("ascii", "strict")
    except UnicodeEncodeError:
        value = value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    return value


class HeaderMap:
    """Case-insensitive, ordered view of a part's header fields."""

    def __init__(self, fields: Iterable[Tuple[str, str]] = ()):
        self._fields: List[Tuple[str, str]] = [(name, unfold_header(value)) for name, value in fields]

    @classmethod
    def from_message(cls, message: Message) -> "HeaderMap":
        return cls(message.raw_items())

    def get(self, name: str, default: str = "") -> str:
        """Return the first value of ``name``, or ``default`` when absent or empty."""
        key = name.lower()
        for field_name, value in self._fields:
            if field_name.lower() == key:
                return value or default
        return default

    def get_all(self, name: str) -> List[str]:
        key = name.lower()
        return [value for field_name, value in self._fields if field_name.lower() == key]

    def items(self) -> List[Tuple[str, str]]:
        return list(self._fields)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(self.get_all(name))

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"HeaderMap({self._fields!r})"


class MessageHandle:
    """
    A parsed message or sub-part: its headers plus a forward-only body stream.

    The body stream holds the payload exactly as transmitted (still
    transfer-encoded). Multipart nodes expose their children through
    ``MultipartReader`` instead of ``body``.
    """

    def __init__(self, message: Message, unterminated: bool = False):
        """
        Args:
            message: Parsed message or sub-part
            unterminated: Last part of a multipart whose closing delimiter is
                missing; one trailing line break is dropped from its body
        """
        self.message = message
        self.header = HeaderMap.from_message(message)
        self.unterminated = unterminated
        self._body: Optional[BinaryIO] = None

    @classmethod
    def from_bytes(cls, raw: bytes) -> "MessageHandle":
        return cls(message_from_bytes(raw, policy=default))

    @classmethod
    def from_binary_file(cls, fp: BinaryIO) -> "MessageHandle":
        # message_from_binary_file reads through universal newlines, which
        # would turn CRLF bodies into LF
        return cls.from_bytes(fp.read())

    @property
    def is_multipart(self) -> bool:
        return self.message.is_multipart()

    @property
    def body(self) -> BinaryIO:
        if self._body is None:
            payload = self._raw_payload()
            if self.unterminated:
                payload = _LAST_LINE_BREAK_RE.sub(b"", payload, count=1)
            self._body = io.BytesIO(payload)
        return self._body

    def _raw_payload(self) -> bytes:
        if self.message.get_content_maintype() == "multipart":
            raise ValueError("multipart bodies are read part by part")
        if self.message.is_multipart():
            # message/rfc822 parts, e.g. untyped children of multipart/digest
            return b"".join(part.as_bytes() for part in self.message.get_payload())

        # Same CTE lookup get_payload() uses internally
        cte = str(self.message.get("content-transfer-encoding", "")).lower()
        if cte not in _SELF_DECODING_CTES:
            return self.message.get_payload(decode=True) or b""
        return self.message.get_payload().encode("ascii", "replace")

    def __repr__(self) -> str:
        return f"MessageHandle(content_type={self.header.get('Content-Type')!r})"
