"""DexScreener actions."""

from pydantic import BaseModel, Field

from .. import tools
from ..types import ActionExample, success_result
from .base import ActionDefinition


class TokenDataByTickerInput(BaseModel):
    """Input schema for DexScreener token lookup."""

    ticker: str = Field(min_length=1, description="Token ticker symbol (e.g. 'USDC')")
    chain_id: str | None = Field(
        default=None,
        description="DexScreener chain id to restrict the search to (e.g. 'ethereum')",
    )


async def _token_data_by_ticker(agent, input: TokenDataByTickerInput) -> dict:
    token = await tools.get_token_data_by_ticker(input.ticker, input.chain_id)
    return success_result(token=token)


token_data_by_ticker_action = ActionDefinition(
    name="GET_TOKEN_DATA_BY_TICKER",
    similes=(
        "token data by ticker",
        "look up token",
        "find token by symbol",
        "get token info",
    ),
    description=(
        "Get token pair data from DexScreener by ticker symbol. "
        "The most valuable matching pair (by FDV) is used."
    ),
    examples=(
        (
            ActionExample(
                input={"ticker": "USDC", "chain_id": "ethereum"},
                output={
                    "status": "success",
                    "token": {
                        "address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
                        "chain_id": "ethereum",
                        "pairs": [{"pairAddress": "0x88e6...", "priceUsd": "1.00"}],
                    },
                },
                explanation="Look up USDC on Ethereum",
            ),
        ),
    ),
    schema=TokenDataByTickerInput,
    handler=_token_data_by_ticker,
)
