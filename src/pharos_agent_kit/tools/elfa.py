"""Elfa AI social mention lookups."""

from typing import Any

from ..config import AgentConfig
from .http import get_json

ELFA_AI_BASE_URL = "https://api.elfa.ai"


def _headers(config: AgentConfig) -> dict[str, str]:
    if not config.elfa_ai_api_key:
        raise ValueError("No Elfa AI API key provided")
    return {"x-elfa-api-key": config.elfa_ai_api_key}


async def ping_elfa_ai_api(config: AgentConfig) -> Any:
    """Check that the Elfa AI API is reachable."""
    return await get_json(f"{ELFA_AI_BASE_URL}/v1/ping", headers=_headers(config))


async def get_elfa_ai_api_key_status(config: AgentConfig) -> Any:
    """Get usage and limits for the configured API key."""
    return await get_json(f"{ELFA_AI_BASE_URL}/v1/key-status", headers=_headers(config))


async def get_smart_mentions(config: AgentConfig, limit: int = 100, offset: int = 0) -> Any:
    """Get tweets by smart accounts with at least some engagement."""
    return await get_json(
        f"{ELFA_AI_BASE_URL}/v1/mentions",
        params={"limit": limit, "offset": offset},
        headers=_headers(config),
    )


async def get_top_mentions_by_ticker(
    config: AgentConfig,
    ticker: str,
    time_window: str = "1h",
    page: int = 1,
    page_size: int = 10,
    include_account_details: bool = False,
) -> Any:
    """Get the most engaging mentions of a ticker."""
    return await get_json(
        f"{ELFA_AI_BASE_URL}/v1/top-mentions",
        params={
            "ticker": ticker,
            "timeWindow": time_window,
            "page": page,
            "pageSize": page_size,
            "includeAccountDetails": str(include_account_details).lower(),
        },
        headers=_headers(config),
    )


async def search_mentions_by_keywords(
    config: AgentConfig,
    keywords: str,
    from_timestamp: int,
    to_timestamp: int,
    limit: int = 20,
) -> Any:
    """Search mentions of keywords within a unix timestamp window."""
    if from_timestamp >= to_timestamp:
        raise ValueError("from_timestamp must be earlier than to_timestamp")
    return await get_json(
        f"{ELFA_AI_BASE_URL}/v1/mentions/search",
        params={
            "keywords": keywords,
            "from": from_timestamp,
            "to": to_timestamp,
            "limit": limit,
        },
        headers=_headers(config),
    )


async def get_trending_tokens_using_elfa_ai(config: AgentConfig) -> Any:
    """Get tokens ranked by mention growth over the last day."""
    return await get_json(
        f"{ELFA_AI_BASE_URL}/v1/trending-tokens",
        params={"timeWindow": "24h", "page": 1, "pageSize": 50, "minMentions": 5},
        headers=_headers(config),
    )


async def get_smart_twitter_account_stats(config: AgentConfig, username: str) -> Any:
    """Get smart follower statistics for a Twitter account."""
    return await get_json(
        f"{ELFA_AI_BASE_URL}/v1/account/smart-stats",
        params={"username": username},
        headers=_headers(config),
    )
