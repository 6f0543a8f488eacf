"""Response bodies returned by the token endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Shape probed by the ownership check; response bodies pass items through as-is
TokenRecord = dict[str, Any]


class BalancesResponse(BaseModel):
    """ERC20 and ERC1155 balances."""

    balances: list[Any] = Field(default_factory=list)


class NftHoldingsResponse(BaseModel):
    """ERC721 holdings plus the 1 Million Nads ownership flag."""

    model_config = ConfigDict(populate_by_name=True)

    is_nad_holder: bool = Field(alias="is1MillionNadHolder")
    nfts: list[Any] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
