import hashlib

from Crypto.Hash import RIPEMD160

from core import constants
from core.config import settings
from core.exceptions import DecodeError
from utils.bech32_utils import ConsAddress, decode_bech32, encode_bech32


class PubKey:
    """A tendermint consensus public key."""

    key_type: str = ""
    amino_prefix: bytes = b""
    size: int = 0

    def __init__(self, key: bytes):
        if len(key) != self.size:
            raise ValueError(
                f"{self.key_type} public key must be {self.size} bytes, got {len(key)}"
            )
        self.key = bytes(key)

    def address(self) -> ConsAddress:
        raise NotImplementedError

    def amino_bytes(self) -> bytes:
        return self.amino_prefix + bytes([self.size]) + self.key

    def to_bech32(self, hrp: str | None = None) -> str:
        return encode_bech32(hrp or settings.BECH32_CONS_PUB_PREFIX, self.amino_bytes())

    def __eq__(self, other):
        if not isinstance(other, PubKey):
            return NotImplemented
        return self.key_type == other.key_type and self.key == other.key

    def __hash__(self):
        return hash((self.key_type, self.key))

    def __repr__(self):
        return f"{type(self).__name__}({self.key.hex()})"


class Ed25519PubKey(PubKey):
    key_type = constants.ED25519_KEY_TYPE
    amino_prefix = constants.ED25519_AMINO_PREFIX
    size = constants.ED25519_PUBKEY_SIZE

    def address(self) -> ConsAddress:
        return ConsAddress(hashlib.sha256(self.key).digest()[: constants.ADDRESS_SIZE])


class Secp256k1PubKey(PubKey):
    key_type = constants.SECP256K1_KEY_TYPE
    amino_prefix = constants.SECP256K1_AMINO_PREFIX
    size = constants.SECP256K1_PUBKEY_SIZE

    def address(self) -> ConsAddress:
        sha = hashlib.sha256(self.key).digest()
        return ConsAddress(RIPEMD160.new(sha).digest())


PUBKEY_TYPES = (Ed25519PubKey, Secp256k1PubKey)


def pubkey_from_amino(payload: bytes, field: str = "consensus public key") -> PubKey:
    for key_cls in PUBKEY_TYPES:
        prefix = key_cls.amino_prefix
        if not payload.startswith(prefix):
            continue

        body = payload[len(prefix) :]
        if not body or body[0] != key_cls.size or len(body) - 1 != key_cls.size:
            raise DecodeError(
                field,
                payload.hex(),
                f"{key_cls.key_type} key must be {key_cls.size} bytes",
            )
        return key_cls(body[1:])

    raise DecodeError(field, payload.hex(), "unknown public key type")


def pubkey_from_bech32(hrp: str, text: str) -> PubKey:
    try:
        return pubkey_from_amino(decode_bech32(hrp, text, "consensus public key"))
    except DecodeError as e:
        # report the stored string rather than the intermediate bytes
        raise DecodeError("consensus public key", text, e.reason) from e
