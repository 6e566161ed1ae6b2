"""CoinGecko actions."""

from typing import Literal

from pydantic import BaseModel, Field

from .. import tools
from ..types import ActionExample, success_result
from .base import ActionDefinition, EmptyInput


class TokenPriceDataInput(BaseModel):
    """Input schema for CoinGecko token price data."""

    token_addresses: list[str] = Field(
        min_length=1,
        description="Token contract addresses to get price data for",
    )
    platform: str = Field(
        default="ethereum",
        description="CoinGecko asset platform id the contracts live on",
    )


class TopGainersInput(BaseModel):
    """Input schema for CoinGecko top gainers."""

    duration: Literal["1h", "24h", "7d", "14d", "30d", "60d", "1y"] = Field(
        default="24h",
        description="Time window to rank gains over",
    )
    top_coins: Literal["300", "500", "1000", "all"] = Field(
        default="all",
        description="Restrict to the top N coins by market cap",
    )


class TrendingPoolsInput(BaseModel):
    """Input schema for CoinGecko trending pools."""

    duration: Literal["5m", "1h", "6h", "24h"] = Field(
        default="24h",
        description="Time window to rank pools over",
    )


async def _token_price_data(agent, input: TokenPriceDataInput) -> dict:
    result = await tools.get_token_price_data(agent.config, input.token_addresses, input.platform)
    return success_result(result=result)


async def _trending_tokens(agent, input: EmptyInput) -> dict:
    return success_result(result=await tools.get_trending_tokens(agent.config))


async def _top_gainers(agent, input: TopGainersInput) -> dict:
    result = await tools.get_top_gainers(agent.config, input.duration, input.top_coins)
    return success_result(result=result)


async def _trending_pools(agent, input: TrendingPoolsInput) -> dict:
    return success_result(result=await tools.get_trending_pools(agent.config, input.duration))


async def _latest_pools(agent, input: EmptyInput) -> dict:
    return success_result(result=await tools.get_latest_pools(agent.config))


get_token_price_data_action = ActionDefinition(
    name="GET_COINGECKO_TOKEN_PRICE_DATA_ACTION",
    similes=(
        "Get the price data of a token on Coingecko",
        "get me the price data of a token on coingecko",
        "what's the price of this token on coingecko",
    ),
    description="Get the price data of a token on Coingecko",
    examples=(
        (
            ActionExample(
                input={"token_addresses": ["0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"]},
                output={
                    "status": "success",
                    "result": {"0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2": {"usd": 1829}},
                },
                explanation=(
                    "Get the price data of the token with the address "
                    "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
                ),
            ),
        ),
    ),
    schema=TokenPriceDataInput,
    handler=_token_price_data,
)

get_trending_tokens_action = ActionDefinition(
    name="GET_COINGECKO_TRENDING_TOKENS_ACTION",
    similes=(
        "get the trending tokens on coingecko",
        "what's trending on coingecko",
        "show me trending coins",
    ),
    description="Get the trending tokens on Coingecko",
    examples=(
        (
            ActionExample(
                input={},
                output={
                    "status": "success",
                    "result": {"coins": [{"item": {"id": "pepe", "symbol": "PEPE"}}]},
                },
                explanation="Get the tokens currently trending on Coingecko",
            ),
        ),
    ),
    schema=EmptyInput,
    handler=_trending_tokens,
)

get_top_gainers_action = ActionDefinition(
    name="GET_COINGECKO_TOP_GAINERS_ACTION",
    similes=(
        "get the top gainers on coingecko",
        "which coins gained the most",
        "top movers today",
    ),
    description="Get the top gaining tokens on Coingecko (requires a pro API key)",
    examples=(
        (
            ActionExample(
                input={"duration": "24h", "top_coins": "all"},
                output={
                    "status": "success",
                    "result": {"top_gainers": [{"id": "pepe", "usd_24h_change": 42.1}]},
                },
                explanation="Get the coins with the biggest gains over the last 24 hours",
            ),
        ),
    ),
    schema=TopGainersInput,
    handler=_top_gainers,
)

get_trending_pools_action = ActionDefinition(
    name="GET_COINGECKO_TRENDING_POOLS_ACTION",
    similes=(
        "get the trending pools on coingecko",
        "which pools are trending",
    ),
    description="Get the trending on-chain pools on Coingecko (requires a pro API key)",
    examples=(
        (
            ActionExample(
                input={"duration": "1h"},
                output={"status": "success", "result": {"data": [{"id": "eth_0x88e6..."}]}},
                explanation="Get the pools trending over the last hour",
            ),
        ),
    ),
    schema=TrendingPoolsInput,
    handler=_trending_pools,
)

get_latest_pools_action = ActionDefinition(
    name="GET_COINGECKO_LATEST_POOLS_ACTION",
    similes=(
        "get the latest pools on coingecko",
        "newest liquidity pools",
    ),
    description="Get the most recently created on-chain pools on Coingecko (requires a pro API key)",
    examples=(
        (
            ActionExample(
                input={},
                output={"status": "success", "result": {"data": [{"id": "base_0x4c36..."}]}},
                explanation="Get the newest pools across networks",
            ),
        ),
    ),
    schema=EmptyInput,
    handler=_latest_pools,
)
