"""Token balance dispatcher.

Every path and every method other than OPTIONS is accepted; the token
kind is picked by substring match on the path (``/erc20``, then
``/erc721``, then ``/erc1155``), so ``/v1/erc721/owned`` is served as
ERC721.
"""

import logging

from fastapi import APIRouter, Depends, Request

from app.core.errors import (
    ConfigurationError,
    InvalidEndpointError,
    MissingAddressError,
    TokenProxyError,
    UnexpectedError,
)
from app.models.responses import BalancesResponse, NftHoldingsResponse
from app.models.tokens import TokenKind
from app.routers.dependencies import get_insight_client, get_settings, require_api_key
from app.services.insight_client import InsightClient
from app.services.pagination import fetch_paginated_data
from app.utils.nft_matching import find_nad_nfts
from config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_api_key)])


async def _fetch_balances(
    client: InsightClient, settings: Settings, kind: TokenKind, address: str,
) -> dict:
    result = await fetch_paginated_data(
        client,
        client.build_tokens_url(kind, address),
        max_empty_responses=settings.max_empty_responses,
    )
    logger.info(
        f"{kind.value.upper()} response count: {len(result.data)}",
        extra={"kind": kind.value, "item_count": len(result.data)},
    )
    return BalancesResponse(balances=result.data).model_dump()


async def _fetch_nfts(client: InsightClient, settings: Settings, address: str) -> dict:
    result = await fetch_paginated_data(
        client,
        client.build_tokens_url(TokenKind.ERC721, address),
        check_for_nad=True,
        nads_contract_address=settings.nads_contract_address,
        max_empty_responses=settings.max_empty_responses,
    )
    nads_nfts = find_nad_nfts(result.data, settings.nads_contract_address)
    is_holder = result.is_nad_holder or len(nads_nfts) > 0

    logger.info(
        f"ERC721 response total count: {len(result.data)}, "
        f"flag from pagination: {result.is_nad_holder}, "
        f"direct check found {len(nads_nfts)} Nad NFTs",
        extra={"kind": TokenKind.ERC721.value, "item_count": len(result.data)},
    )
    return NftHoldingsResponse(is_nad_holder=is_holder, nfts=result.data).model_dump(
        by_alias=True
    )


def _summarize(payload: dict) -> dict:
    return {
        key: f"[{len(value)} items]" if isinstance(value, list) else value
        for key, value in payload.items()
    }


@router.api_route(
    "/{full_path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"],
)
async def get_token_balances(
    request: Request,
    full_path: str,
    address: str | None = None,
    settings: Settings = Depends(get_settings),
    client: InsightClient = Depends(get_insight_client),
) -> dict:
    """Return ERC20/ERC1155 balances or ERC721 holdings for ``address``."""
    try:
        if not address:
            raise MissingAddressError()
        if not settings.thirdweb_client_id:
            raise ConfigurationError("THIRDWEB_CLIENT_ID is not configured on the server")

        kind = TokenKind.from_path(request.url.path)
        if kind is None:
            raise InvalidEndpointError()

        if kind is TokenKind.ERC721:
            payload = await _fetch_nfts(client, settings, address)
        else:
            payload = await _fetch_balances(client, settings, kind, address)
    except TokenProxyError:
        raise
    except Exception as exc:
        logger.error(
            f"Unhandled error on {request.url.path}: {exc}",
            extra={"path": request.url.path},
            exc_info=True,
        )
        raise UnexpectedError.from_exception(
            exc, include_traceback=not settings.is_production
        ) from exc

    logger.info(f"Final response: {_summarize(payload)}")
    return payload
