"""DexScreener token lookups."""

from typing import Any

from .http import get_json

DEXSCREENER_URL = "https://api.dexscreener.com"


async def find_best_pair(ticker: str, chain_id: str | None = None) -> dict[str, Any] | None:
    """
    Find the most valuable pair for a ticker.

    Pairs whose base token symbol matches the ticker are ranked by fully
    diluted valuation; the highest one wins.

    Args:
        ticker: Token symbol, e.g. "USDC"
        chain_id: Optional DexScreener chain id to restrict the search to

    Returns:
        Pair data, or None if no pair matches
    """
    data = await get_json(f"{DEXSCREENER_URL}/latest/dex/search", params={"q": ticker})

    candidates = [
        pair
        for pair in data.get("pairs") or []
        if pair.get("baseToken", {}).get("symbol", "").lower() == ticker.lower()
        and (chain_id is None or pair.get("chainId") == chain_id)
    ]
    if not candidates:
        return None

    return max(candidates, key=lambda pair: pair.get("fdv") or 0)


async def get_token_address_from_ticker(ticker: str, chain_id: str | None = None) -> str | None:
    """Resolve a ticker to a token address."""
    pair = await find_best_pair(ticker, chain_id)
    return pair["baseToken"]["address"] if pair else None


async def get_token_data_by_address(token_address: str, chain_id: str) -> Any:
    """Get pair data for a token address on a chain."""
    if not token_address:
        raise ValueError("Token address is required for fetching token data")
    return await get_json(f"{DEXSCREENER_URL}/tokens/v1/{chain_id}/{token_address}")


async def get_token_data_by_ticker(ticker: str, chain_id: str | None = None) -> dict[str, Any]:
    """Get token pair data by ticker symbol."""
    pair = await find_best_pair(ticker, chain_id)
    if pair is None:
        raise ValueError(f"Token address not found for ticker: {ticker}")

    address = pair["baseToken"]["address"]
    return {
        "address": address,
        "chain_id": pair["chainId"],
        "pairs": await get_token_data_by_address(address, pair["chainId"]),
    }
