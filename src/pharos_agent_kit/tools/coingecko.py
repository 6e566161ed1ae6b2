"""CoinGecko market data lookups."""

from typing import Any

from ..config import AgentConfig
from .http import get_json

COINGECKO_PRO_URL = "https://pro-api.coingecko.com/api/v3"
COINGECKO_DEMO_URL = "https://api.coingecko.com/api/v3"


def _endpoint(config: AgentConfig, require_pro: bool = False) -> tuple[str, dict[str, str]]:
    """Pick the API host and auth header for the configured key."""
    if config.coingecko_pro_api_key:
        return COINGECKO_PRO_URL, {"x-cg-pro-api-key": config.coingecko_pro_api_key}
    if require_pro:
        raise ValueError("This CoinGecko endpoint requires a pro API key")
    if config.coingecko_demo_api_key:
        return COINGECKO_DEMO_URL, {"x-cg-demo-api-key": config.coingecko_demo_api_key}
    raise ValueError("No CoinGecko API key provided")


async def get_token_price_data(
    config: AgentConfig,
    token_addresses: list[str],
    platform: str = "ethereum",
) -> dict[str, Any]:
    """Get price, market cap, volume and 24h change for token contracts."""
    base_url, headers = _endpoint(config)
    return await get_json(
        f"{base_url}/simple/token_price/{platform}",
        params={
            "contract_addresses": ",".join(token_addresses),
            "vs_currencies": "usd",
            "include_market_cap": "true",
            "include_24hr_vol": "true",
            "include_24hr_change": "true",
            "include_last_updated_at": "true",
        },
        headers=headers,
    )


async def get_trending_tokens(config: AgentConfig) -> dict[str, Any]:
    """Get trending coins, NFTs and categories."""
    base_url, headers = _endpoint(config)
    return await get_json(f"{base_url}/search/trending", headers=headers)


async def get_top_gainers(
    config: AgentConfig,
    duration: str = "24h",
    top_coins: str = "all",
) -> dict[str, Any]:
    """Get top gaining and losing coins (pro API only)."""
    base_url, headers = _endpoint(config, require_pro=True)
    return await get_json(
        f"{base_url}/coins/top_gainers_losers",
        params={"vs_currency": "usd", "duration": duration, "top_coins": top_coins},
        headers=headers,
    )


async def get_trending_pools(config: AgentConfig, duration: str = "24h") -> dict[str, Any]:
    """Get trending on-chain pools (pro API only)."""
    base_url, headers = _endpoint(config, require_pro=True)
    return await get_json(
        f"{base_url}/onchain/networks/trending_pools",
        params={"include": "base_token,network", "duration": duration},
        headers=headers,
    )


async def get_latest_pools(config: AgentConfig) -> dict[str, Any]:
    """Get the newest on-chain pools across networks (pro API only)."""
    base_url, headers = _endpoint(config, require_pro=True)
    return await get_json(
        f"{base_url}/onchain/networks/new_pools",
        params={"include": "base_token,network"},
        headers=headers,
    )
