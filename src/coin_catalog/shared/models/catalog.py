# coin_catalog/shared/models/catalog.py

from pydantic import BaseModel, ConfigDict, Field


class Coin(BaseModel):
    """
    A tradable asset as listed by the remote catalog.

    Identity is ``uid``; everything else is descriptive.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    uid: str = Field(..., min_length=1, description="Stable unique identifier")
    name: str
    code: str
    market_cap_rank: int | None = Field(default=None)
    coingecko_id: str | None = Field(default=None)

    @property
    def identity(self) -> str:
        return self.uid


class BlockchainRecord(BaseModel):
    """A blockchain a token can live on."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    uid: str = Field(..., min_length=1)
    name: str
    explorer_url: str | None = Field(default=None)

    @property
    def identity(self) -> str:
        return self.uid


class TokenRecord(BaseModel):
    """
    Representation of a coin on one blockchain.

    ``type`` is ``native`` or a tag such as ``eip20``, ``spl``,
    ``derived:<kind>`` or ``address_type:<kind>``. ``reference`` holds the
    contract address / mint where the type needs one.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    coin_uid: str
    blockchain_uid: str
    type: str
    decimals: int = Field(..., ge=0)
    reference: str | None = Field(default=None)

    @property
    def identity(self) -> tuple[str, str, str]:
        return (self.coin_uid, self.blockchain_uid, self.type)


class SyncInfo(BaseModel):
    """Raw last-sync timestamps as stored, for diagnostics."""

    coins_timestamp: str | None = None
    blockchains_timestamp: str | None = None
    tokens_timestamp: str | None = None


class CatalogStatus(BaseModel):
    """Dataset timestamps reported by the remote catalog status endpoint."""

    model_config = ConfigDict(extra="ignore")

    coins: int
    blockchains: int
    tokens: int
