# Amino registered type prefixes of the tendermint consensus keys, each
# followed by a single length byte in the encoded key.
ED25519_AMINO_PREFIX = bytes.fromhex("1624de64")
SECP256K1_AMINO_PREFIX = bytes.fromhex("eb5ae987")

ED25519_PUBKEY_SIZE = 32
SECP256K1_PUBKEY_SIZE = 33

ED25519_KEY_TYPE = "ed25519"
SECP256K1_KEY_TYPE = "secp256k1"

# tendermint addresses are the first 20 bytes of the key hash
ADDRESS_SIZE = 20
MAX_ADDRESS_SIZE = 255

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# the reference bech32 codec stops at 90 characters, cosmos-sdk accepts up to 1023
BECH32_MAX_LENGTH = 90
COSMOS_BECH32_MAX_LENGTH = 1023
