"""From/To header parsing with Japanese display names."""

from email.utils import getaddresses
from typing import List, Optional

from jmail.config.decoder_config import CharsetConfig
from jmail.models.address import Address
from jmail.utils.unicode_utils import decode_email_header

from .decoding.base import AddressParseError


def parse_address_list(value: Optional[str], charsets: Optional[CharsetConfig] = None) -> List[Address]:
    """
    Parse an address-list header into decoded addresses.

    Display names may hold encoded words in utf-8, us-ascii, iso-8859-1,
    iso-2022-jp or euc-jp. The Japanese charsets use the same codecs as the
    subject and body decoders.

    Args:
        value: Raw header value, e.g. ``=?ISO-2022-JP?B?...?= <taro@example.jp>``
        charsets: Codec overrides for the Japanese charsets

    Returns:
        Addresses in header order

    Raises:
        AddressParseError: If the header is empty, malformed, or uses an
            unsupported charset
    """
    if not value or not value.strip():
        raise AddressParseError("No address")

    addresses = []
    for name, addr in getaddresses([value]):
        if not addr or "@" not in addr:
            raise AddressParseError(f"Malformed address list: {value!r}")
        try:
            display_name = decode_email_header(name, charsets)
        except (LookupError, UnicodeDecodeError) as e:
            raise AddressParseError(f"Cannot decode display name {name!r}: {e}") from e
        addresses.append(Address(name=display_name, address=addr))

    return addresses
