"""DeFiLlama actions."""

from pydantic import BaseModel, Field

from .. import tools
from ..types import ActionExample, success_result
from .base import ActionDefinition


class FetchPriceInput(BaseModel):
    """Input schema for DeFiLlama price lookup."""

    chain_token_addr_strings: list[str] = Field(
        min_length=1,
        description=(
            'Array of strings in format of "chain:token_address" '
            '(e.g. "ethereum:0x0000000000000000000000000000000000000000")'
        ),
    )
    search_width: str | None = Field(
        default=None,
        description="The width of the search window for the price data (e.g. '6h')",
    )


class ProtocolTvlInput(BaseModel):
    """Input schema for DeFiLlama TVL lookup."""

    protocol_name: str = Field(
        description="The DeFiLlama protocol identifier (e.g. 'aave-v3', 'uniswap-v3')",
    )


async def _fetch_price(agent, input: FetchPriceInput) -> dict:
    prices = await tools.fetch_prices(input.chain_token_addr_strings, input.search_width)
    return success_result(summary={"prices": prices})


async def _get_protocol_tvl(agent, input: ProtocolTvlInput) -> dict:
    result = await tools.get_protocol_tvl(input.protocol_name)
    return success_result(summary=result)


fetch_price_action = ActionDefinition(
    name="DEFILLAMA_FETCH_PRICE",
    similes=(
        "get token price",
        "fetch price",
        "check token price",
        "get price from defillama",
    ),
    description=(
        "Fetches the price of one or more tokens using the DeFiLlama price API. "
        "Tokens are specified using chain:address format."
    ),
    examples=(
        (
            ActionExample(
                input={
                    "chain_token_addr_strings": [
                        "ethereum:0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
                    ],
                },
                output={
                    "status": "success",
                    "summary": {
                        "prices": {
                            "ethereum:0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2": {
                                "price": 1829,
                                "symbol": "WETH",
                            },
                        },
                    },
                },
                explanation=(
                    "The user wants to fetch the price of WETH on Ethereum. "
                    "The action returns the current price in USD."
                ),
            ),
        ),
    ),
    schema=FetchPriceInput,
    handler=_fetch_price,
)

get_protocol_tvl_action = ActionDefinition(
    name="DEFILLAMA_GET_PROTOCOL_TVL",
    similes=(
        "get protocol tvl",
        "fetch protocol tvl",
        "check protocol tvl",
        "get total value locked",
        "fetch total value locked",
    ),
    description=(
        "Fetches the Total Value Locked (TVL) for a protocol using the DeFiLlama API. "
        "The protocol name should match the DeFiLlama protocol identifier."
    ),
    examples=(
        (
            ActionExample(
                input={"protocol_name": "uniswap-v3"},
                output={
                    "status": "success",
                    "summary": {"tvl": 98274459992.88, "protocol_name": "uniswap-v3"},
                },
                explanation=(
                    "The user wants to fetch the TVL for Uniswap V3 protocol. "
                    "The action returns the current TVL in USD."
                ),
            ),
        ),
    ),
    schema=ProtocolTvlInput,
    handler=_get_protocol_tvl,
)
