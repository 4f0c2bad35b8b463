"""Parsed Content-Type value."""

from dataclasses import dataclass, field
from typing import Dict, Optional


TEXT_PREFIX = "text/"
MULTIPART_PREFIX = "multipart/"


@dataclass(frozen=True)
class MediaType:
    """
    A media type and its parameters.

    Attributes:
        type: Lower-cased ``maintype/subtype``
        params: Parameter values keyed by lower-cased parameter name
    """

    type: str
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def is_text(self) -> bool:
        return self.type.startswith(TEXT_PREFIX)

    @property
    def is_multipart(self) -> bool:
        return self.type.startswith(MULTIPART_PREFIX)

    @property
    def charset(self) -> Optional[str]:
        charset = self.params.get("charset")
        return charset.lower() if charset else None

    @property
    def boundary(self) -> Optional[str]:
        return self.params.get("boundary") or None
