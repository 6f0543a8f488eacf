"""Ownership detection for the 1 Million Nads collection.

Insight returns NFTs in several shapes depending on the endpoint and the
indexer version, so the contract address is probed from four fields in a
fixed priority order:

1. ``contract.address``
2. ``token_address``
3. ``asset_contract.address``
4. ``contract_address``
"""

import json
import logging
from typing import Any, Iterable

from app.models.responses import TokenRecord

logger = logging.getLogger(__name__)


def _nested(record: TokenRecord, outer: str, inner: str) -> Any:
    value = record.get(outer)
    if isinstance(value, dict):
        return value.get(inner)
    return None


def extract_contract_address(record: TokenRecord | None) -> str | None:
    """Return the first address found on ``record``, or None."""
    if not record or not isinstance(record, dict):
        return None

    candidates = (
        _nested(record, "contract", "address"),
        record.get("token_address"),
        _nested(record, "asset_contract", "address"),
        record.get("contract_address"),
    )
    for candidate in candidates:
        if candidate:
            return candidate if isinstance(candidate, str) else None
    return None


def _describe(record: TokenRecord) -> dict:
    metadata = record.get("metadata")
    if not isinstance(metadata, dict):
        metadata = {}
    return {
        "tokenId": record.get("token_id") or record.get("tokenId") or record.get("id"),
        "name": record.get("name") or metadata.get("name"),
        "symbol": record.get("symbol") or metadata.get("symbol"),
    }


def is_nad_nft(record: TokenRecord | None, nads_contract_address: str) -> bool:
    """Check whether ``record`` belongs to the given contract (case-insensitive)."""
    if not record:
        return False

    nft_address = extract_contract_address(record)
    if not nft_address:
        logger.debug(
            "Could not extract address from NFT: %s",
            json.dumps(record, default=str)[:200],
        )
        return False

    is_nad = nft_address.lower() == nads_contract_address.lower()
    if is_nad:
        logger.info(f"Found NAD NFT with address: {nft_address}")
        logger.debug(f"NAD NFT details: {json.dumps(_describe(record), default=str)}")
    return is_nad


def find_nad_nfts(records: Iterable[TokenRecord], nads_contract_address: str) -> list[TokenRecord]:
    """Return every record that belongs to the given contract."""
    return [r for r in records if is_nad_nft(r, nads_contract_address)]
