"""External I/O used by action handlers."""

from .coingecko import (
    get_latest_pools,
    get_token_price_data,
    get_top_gainers,
    get_trending_pools,
    get_trending_tokens,
)
from .defillama import fetch_prices, fetch_token_price_by_chain_id, get_protocol_tvl
from .dexscreener import get_token_address_from_ticker, get_token_data_by_ticker
from .elfa import (
    get_elfa_ai_api_key_status,
    get_smart_mentions,
    get_smart_twitter_account_stats,
    get_top_mentions_by_ticker,
    get_trending_tokens_using_elfa_ai,
    ping_elfa_ai_api,
    search_mentions_by_keywords,
)
from .erc20 import get_erc20_balance, get_token_decimals, transfer
from .erc721 import erc721_mint, erc721_transfer, get_erc721_balance, is_contract
from .image import create_image
from .perplexity import get_info

__all__ = [
    # CoinGecko
    "get_latest_pools",
    "get_token_price_data",
    "get_top_gainers",
    "get_trending_pools",
    "get_trending_tokens",
    # DeFiLlama
    "fetch_prices",
    "fetch_token_price_by_chain_id",
    "get_protocol_tvl",
    # DexScreener
    "get_token_address_from_ticker",
    "get_token_data_by_ticker",
    # Elfa AI
    "get_elfa_ai_api_key_status",
    "get_smart_mentions",
    "get_smart_twitter_account_stats",
    "get_top_mentions_by_ticker",
    "get_trending_tokens_using_elfa_ai",
    "ping_elfa_ai_api",
    "search_mentions_by_keywords",
    # ERC-20
    "get_erc20_balance",
    "get_token_decimals",
    "transfer",
    # ERC-721
    "erc721_mint",
    "erc721_transfer",
    "get_erc721_balance",
    "is_contract",
    # Agent
    "create_image",
    "get_info",
]
