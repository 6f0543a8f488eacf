"""Paginated aggregation over the Insight token endpoints.

Pages are requested one at a time, starting at page 0, until
``max_empty_responses`` consecutive pages come back empty. A failed page
request counts as an empty page: the loop cannot tell an outage from the
end of the data, so an upstream failure may truncate the result.
"""

import logging
from typing import Any, Protocol

from app.models.tokens import PaginatedResult
from app.utils.nft_matching import find_nad_nfts, is_nad_nft
from config import NADS_CONTRACT_ADDRESS

logger = logging.getLogger(__name__)

MAX_EMPTY_RESPONSES = 2


class PageFetcher(Protocol):
    async def fetch_single_request(self, url: str) -> Any: ...


def _page_items(page_result: Any) -> list:
    if not isinstance(page_result, dict):
        return []
    data = page_result.get("data")
    return data if isinstance(data, list) else []


async def fetch_paginated_data(
    client: PageFetcher,
    base_url: str,
    check_for_nad: bool = False,
    nads_contract_address: str = NADS_CONTRACT_ADDRESS,
    max_empty_responses: int = MAX_EMPTY_RESPONSES,
) -> PaginatedResult:
    """Fetch every page of ``base_url`` and concatenate the records.

    Args:
        client: Anything with an async ``fetch_single_request(url)``.
        base_url: Query URL without the ``page`` parameter.
        check_for_nad: Also compute whether any record belongs to
            ``nads_contract_address``.
        nads_contract_address: Contract that makes an owner a Nad holder.
        max_empty_responses: Consecutive empty (or failed) pages that end
            the loop.

    Returns:
        The aggregate. If something outside the per-page guard fails, the
        records collected so far are returned instead of raising.
    """
    result = PaginatedResult()
    current_page = 0
    empty_response_count = 0

    try:
        logger.info(f"Starting paginated fetch for {base_url}")

        while empty_response_count < max_empty_responses:
            page_url = f"{base_url}&page={current_page}"
            logger.debug(f"Fetching page {current_page}: {page_url}", extra={"page": current_page})
            result.pages_fetched += 1

            try:
                page_result = await client.fetch_single_request(page_url)
            except Exception as e:
                logger.error(
                    f"Error fetching page {current_page}: {e}",
                    extra={"page": current_page, "error_type": type(e).__name__},
                )
                empty_response_count += 1
                current_page += 1
                continue

            items = _page_items(page_result)
            if not items:
                logger.debug(f"Empty data at page {current_page}, incrementing empty count")
                empty_response_count += 1
                current_page += 1
                continue

            empty_response_count = 0
            logger.debug(
                f"Page {current_page} has {len(items)} items",
                extra={"page": current_page, "item_count": len(items)},
            )
            result.data.extend(items)

            if check_for_nad and not result.is_nad_holder:
                if any(is_nad_nft(item, nads_contract_address) for item in items):
                    logger.info(f"Found 1 Million Nad NFT in page {current_page}!")
                    result.is_nad_holder = True

            current_page += 1

        # Second pass over everything collected; can only set the flag
        if check_for_nad and find_nad_nfts(result.data, nads_contract_address):
            if not result.is_nad_holder:
                logger.info("Verified 1 Million Nad NFT holder through direct check of all data")
            result.is_nad_holder = True

        logger.info(
            f"Pagination complete. Fetched {len(result.data)} total items "
            f"across {current_page} pages",
            extra={"item_count": len(result.data)},
        )
    except Exception:
        logger.error("Error in paginated fetch, returning partial data", exc_info=True)

    return result
