"""Mail address data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """
    A single mailbox from an address header.

    Attributes:
        name: Decoded display name (may be empty)
        address: addr-spec, e.g. ``taro@example.jp``
    """

    name: str
    address: str

    def __str__(self) -> str:
        return f"{self.name} <{self.address}>" if self.name else self.address
