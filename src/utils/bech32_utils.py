from bech32 import (
    CHARSET,
    bech32_decode,
    bech32_encode,
    bech32_hrp_expand,
    bech32_polymod,
    convertbits,
)

from core import constants
from core.config import settings
from core.exceptions import DecodeError


def bech32_decode_long(text: str):
    """Split a bech32 string longer than the reference codec allows.

    Same checks as ``bech32.bech32_decode`` with the cosmos-sdk length
    limit. Returns ``(hrp, data)`` or ``(None, None)``.
    """
    if any(ord(x) < 33 or ord(x) > 126 for x in text):
        return None, None
    if text.lower() != text and text.upper() != text:
        return None, None
    text = text.lower()
    pos = text.rfind("1")
    if pos < 1 or pos + 7 > len(text) or len(text) > constants.COSMOS_BECH32_MAX_LENGTH:
        return None, None
    if not all(x in CHARSET for x in text[pos + 1:]):
        return None, None
    hrp = text[:pos]
    data = [CHARSET.find(x) for x in text[pos + 1:]]
    if bech32_polymod(bech32_hrp_expand(hrp) + data) != 1:
        return None, None
    return hrp, data[:-6]


def decode_bech32(hrp: str, text: str, field: str = "bech32 string") -> bytes:
    """Decode ``text`` into its raw payload, requiring the exact ``hrp``.

    Any malformed input (bad checksum, mixed case, other prefix, invalid
    padding) raises DecodeError; a partial result is never returned.
    Strings up to 1023 characters are accepted, as on cosmos-sdk chains.
    """
    if not isinstance(text, str) or not text:
        raise DecodeError(field, text, "empty or non string value")

    if len(text) > constants.BECH32_MAX_LENGTH:
        got_hrp, data = bech32_decode_long(text)
    else:
        got_hrp, data = bech32_decode(text)
    if got_hrp is None or data is None:
        raise DecodeError(field, text, "invalid bech32 encoding")
    if got_hrp != hrp:
        raise DecodeError(field, text, f"expected prefix {hrp}, got {got_hrp}")

    payload = convertbits(data, 5, 8, False)
    if payload is None:
        raise DecodeError(field, text, "invalid bech32 padding")
    return bytes(payload)


def encode_bech32(hrp: str, payload: bytes) -> str:
    return bech32_encode(hrp, convertbits(payload, 8, 5))


class Bech32Address(bytes):
    """Raw address bytes bound to the bech32 prefix they are rendered with."""

    field_name = "address"

    @classmethod
    def prefix(cls) -> str:
        raise NotImplementedError

    @classmethod
    def from_bech32(cls, text: str):
        payload = decode_bech32(cls.prefix(), text, cls.field_name)
        if not payload:
            raise DecodeError(cls.field_name, text, "empty address")
        if len(payload) > constants.MAX_ADDRESS_SIZE:
            raise DecodeError(
                cls.field_name,
                text,
                f"address length {len(payload)} exceeds {constants.MAX_ADDRESS_SIZE}",
            )
        return cls(payload)

    def to_bech32(self) -> str:
        return encode_bech32(self.prefix(), bytes(self))

    def __str__(self):
        return self.to_bech32()

    def __repr__(self):
        return f"{type(self).__name__}({self.to_bech32()!r})"

    # equality is per address kind, an account and a validator built from
    # the same bytes are different addresses
    def __eq__(self, other):
        if isinstance(other, Bech32Address):
            return type(self) is type(other) and bytes(self) == bytes(other)
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((type(self).__name__, bytes(self)))


class AccAddress(Bech32Address):
    field_name = "account address"

    @classmethod
    def prefix(cls) -> str:
        return settings.BECH32_ACC_ADDR_PREFIX


class ValAddress(Bech32Address):
    field_name = "operator address"

    @classmethod
    def prefix(cls) -> str:
        return settings.BECH32_VAL_ADDR_PREFIX


class ConsAddress(Bech32Address):
    field_name = "consensus address"

    @classmethod
    def prefix(cls) -> str:
        return settings.BECH32_CONS_ADDR_PREFIX
