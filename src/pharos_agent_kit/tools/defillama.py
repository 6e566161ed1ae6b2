"""DeFiLlama price and TVL lookups."""

import difflib
import logging
from typing import Any

import httpx

from .http import get_json

logger = logging.getLogger(__name__)

DEFILLAMA_BASE_URL = "https://api.llama.fi"
DEFILLAMA_PRICES_URL = "https://coins.llama.fi"

# Chain id -> DeFiLlama chain slug
DEFILLAMA_NETWORK_MAPPING: dict[int, str] = {
    1: "ethereum",
    10: "optimism",
    56: "bsc",
    137: "polygon",
    8453: "base",
    42161: "arbitrum",
    43114: "avax",
}


async def fetch_prices(
    chain_token_addr_strings: list[str],
    search_width: str | None = None,
) -> dict[str, Any]:
    """
    Fetch current token prices.

    Args:
        chain_token_addr_strings: Tokens as "chain:token_address"
            (e.g. "ethereum:0x0000000000000000000000000000000000000000")
        search_width: Width of the search window for the price data (e.g. "6h")

    Returns:
        DeFiLlama ``coins`` mapping keyed by chain:address
    """
    if not chain_token_addr_strings:
        raise ValueError("At least one chain:token_address string is required")

    tokens = ",".join(chain_token_addr_strings)
    params = {"searchWidth": search_width} if search_width else None
    data = await get_json(f"{DEFILLAMA_PRICES_URL}/prices/current/{tokens}", params=params)
    return data.get("coins", {})


def get_slug_matches(name: str, slugs: list[str], limit: int = 4) -> list[str]:
    """Find the closest matching protocol slugs for a name or ticker."""
    needle = name.strip().lower()
    if needle in slugs:
        return [needle]
    return difflib.get_close_matches(needle, slugs, n=limit, cutoff=0.6)


async def get_protocol_slugs() -> list[str]:
    """List all DeFiLlama protocol slugs."""
    protocols = await get_json(f"{DEFILLAMA_BASE_URL}/protocols")
    return [p["slug"] for p in protocols if p.get("slug")]


async def get_protocol_tvl(protocol_name: str) -> dict[str, Any]:
    """
    Get Total Value Locked (TVL) for a protocol.

    The name is matched against DeFiLlama's protocol slugs; the first
    matching slug that returns data wins.

    Returns:
        Dict with ``protocol_name`` (the slug used) and ``tvl`` in USD
    """
    slugs = await get_protocol_slugs()
    matches = get_slug_matches(protocol_name, slugs)

    if not matches:
        raise ValueError(f"No matching protocol slugs found for '{protocol_name}'")

    last_error: Exception | None = None
    for slug in matches:
        try:
            tvl = await get_json(f"{DEFILLAMA_BASE_URL}/tvl/{slug}")
        except httpx.HTTPError as e:
            last_error = e
            continue
        if tvl is not None:
            return {"protocol_name": slug, "tvl": tvl}

    logger.warning("No TVL data for %s (tried %s): %s", protocol_name, matches, last_error)
    raise ValueError("Failed to fetch TVL data for any matching protocol slug")


async def fetch_token_price_by_chain_id(token_address: str, chain_id: int) -> dict[str, Any]:
    """Fetch a token price using a numeric chain id."""
    chain_slug = DEFILLAMA_NETWORK_MAPPING.get(chain_id)
    if chain_slug is None:
        raise ValueError(f"Chain {chain_id} is not supported by DeFiLlama lookups")
    return await fetch_prices([f"{chain_slug}:{token_address}"])
