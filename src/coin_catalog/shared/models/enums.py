"""
Shared enumerations for the coin catalog.

Blockchain identifiers and the addressing schemes a blockchain can expose
through its token records.
"""

import enum

NATIVE_TOKEN_TYPE = "native"


class BlockchainUid(str, enum.Enum):
    """Catalog uids of blockchains the library has special handling for."""

    BITCOIN = "bitcoin"
    LITECOIN = "litecoin"
    BITCOIN_CASH = "bitcoin-cash"
    SOLANA = "solana"
    XDC_NETWORK = "xdc-network"


class Derivation(str, enum.Enum):
    """BIP derivation paths for UTXO chains with segwit/taproot support."""

    BIP44 = "bip44"
    BIP49 = "bip49"
    BIP84 = "bip84"
    BIP86 = "bip86"

    @property
    def token_type(self) -> str:
        return f"derived:{self.value}"


class AddressType(str, enum.Enum):
    """Bitcoin Cash address encodings (legacy coin type 0 vs CashAddr 145)."""

    TYPE0 = "type0"
    TYPE145 = "type145"

    @property
    def token_type(self) -> str:
        return f"address_type:{self.value}"


class Dataset(str, enum.Enum):
    """The three sub-datasets synced together."""

    COINS = "coins"
    BLOCKCHAINS = "blockchains"
    TOKENS = "tokens"


def derivation_token_types() -> list[str]:
    """Token type tags for every derivation, in declaration order."""
    return [d.token_type for d in Derivation]


def address_token_types() -> list[str]:
    """Token type tags for every address type, in declaration order."""
    return [a.token_type for a in AddressType]
