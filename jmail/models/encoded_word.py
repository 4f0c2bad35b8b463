"""RFC 2047 encoded-word variants recognized by the subject decoder."""

from enum import Enum
from typing import Optional


ENCODED_WORD_INTRODUCER = "=?"
ENCODED_WORD_TERMINATOR = "?="


class EncodedWordKind(Enum):
    """
    Supported charset/encoding combinations of an encoded word.

    Members are listed in matching order. UNSUPPORTED covers every token
    that starts with the introducer but matches none of the others.
    """

    ISO2022JP_BASE64 = ("iso-2022-jp", "b")
    ISO2022JP_QUOTED_PRINTABLE = ("iso-2022-jp", "q")
    UTF8_BASE64 = ("utf-8", "b")
    UTF8_QUOTED_PRINTABLE = ("utf-8", "q")
    UNSUPPORTED = (None, None)

    def __init__(self, charset: Optional[str], encoding: Optional[str]):
        self.charset = charset
        self.encoding = encoding

    @property
    def prefix(self) -> Optional[str]:
        """Lower-cased introducer, e.g. ``=?utf-8?b?``."""
        if self.charset is None:
            return None
        return f"{ENCODED_WORD_INTRODUCER}{self.charset}?{self.encoding}?"

    @property
    def is_base64(self) -> bool:
        return self.encoding == "b"

    @classmethod
    def classify(cls, token: str) -> "EncodedWordKind":
        """
        Match a whitespace-free token against the supported prefixes.

        Args:
            token: Token starting with ``=?``

        Returns:
            The matching kind, or UNSUPPORTED

        Examples:
            >>> EncodedWordKind.classify("=?UTF-8?B?aGVsbG8=?=")
            <EncodedWordKind.UTF8_BASE64: ('utf-8', 'b')>
            >>> EncodedWordKind.classify("=?iso-8859-1?q?caf=E9?=")
            <EncodedWordKind.UNSUPPORTED: (None, None)>
        """
        for kind in cls:
            prefix = kind.prefix
            if prefix is None:
                continue
            if len(token) > len(prefix) and token[: len(prefix)].lower() == prefix:
                return kind
        return cls.UNSUPPORTED
