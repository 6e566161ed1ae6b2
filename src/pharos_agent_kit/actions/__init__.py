"""
Built-in actions.

Each action is authored independently in its provider module and
collected here, in registration order, into ``ACTIONS``.
"""

from typing import Iterable

from .agent import create_image_action, get_info_action, get_wallet_address_action
from .base import ActionDefinition, EmptyInput, Handler
from .coingecko import (
    get_latest_pools_action,
    get_token_price_data_action,
    get_top_gainers_action,
    get_trending_pools_action,
    get_trending_tokens_action,
)
from .defillama import fetch_price_action, get_protocol_tvl_action
from .dexscreener import token_data_by_ticker_action
from .elfa import (
    elfa_api_key_status_action,
    elfa_get_smart_mentions_action,
    elfa_get_top_mentions_by_ticker_action,
    elfa_ping_action,
    elfa_search_mentions_by_keywords_action,
    elfa_smart_twitter_account_stats_action,
    elfa_trending_tokens_action,
)
from .erc20 import erc20_balance_action, erc20_transfer_action
from .erc721 import erc721_balance_action, erc721_mint_action, erc721_transfer_action

ACTIONS: tuple[ActionDefinition, ...] = (
    # Agent
    get_wallet_address_action,
    get_info_action,
    create_image_action,
    # Tokens
    erc20_balance_action,
    erc20_transfer_action,
    erc721_balance_action,
    erc721_transfer_action,
    erc721_mint_action,
    # Elfa AI
    elfa_ping_action,
    elfa_api_key_status_action,
    elfa_get_smart_mentions_action,
    elfa_get_top_mentions_by_ticker_action,
    elfa_search_mentions_by_keywords_action,
    elfa_trending_tokens_action,
    elfa_smart_twitter_account_stats_action,
    # CoinGecko
    get_latest_pools_action,
    get_token_price_data_action,
    get_top_gainers_action,
    get_trending_pools_action,
    get_trending_tokens_action,
    # DeFiLlama
    fetch_price_action,
    get_protocol_tvl_action,
    # DexScreener
    token_data_by_ticker_action,
)


def create_action_registry(extra: Iterable[ActionDefinition] = ()):
    """
    Build a registry of the built-in actions plus any extra ones.

    Raises:
        DuplicateActionError: An extra action reuses a built-in name
    """
    from ..registry import ActionRegistry

    registry = ActionRegistry(ACTIONS)
    for action in extra:
        registry.register(action)
    return registry


__all__ = [
    "ACTIONS",
    "ActionDefinition",
    "EmptyInput",
    "Handler",
    "create_action_registry",
]
