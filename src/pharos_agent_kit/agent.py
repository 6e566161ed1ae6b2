"""Execution context shared by every action handler."""

from typing import Any

from . import tools
from .chains.pharos import PharosChainConfig, PharosChains, PharosClient
from .config import AgentConfig
from .wallet import LocalWalletProvider, WalletProvider


class PharosAgentKit:
    """
    Pharos Agent Kit.

    Bundles the wallet provider, chain connection and configuration that
    action handlers depend on. Built once by the caller and shared
    read-only across concurrent action invocations.

    Example:
        >>> agent = PharosAgentKit.from_private_key(
        ...     private_key="0x...",
        ...     rpc_url="https://devnet.dplabs-internal.com",
        ...     config=AgentConfig(coingecko_demo_api_key="..."),
        ... )
        >>>
        >>> await agent.get_balance()
        '1.5'
    """

    def __init__(
        self,
        wallet: WalletProvider,
        client: PharosClient,
        config: AgentConfig | None = None,
    ) -> None:
        self._wallet = wallet
        self._client = client
        self._config = config or AgentConfig()

    @classmethod
    def from_private_key(
        cls,
        private_key: str,
        rpc_url: str | None = None,
        config: AgentConfig | None = None,
        chain: PharosChainConfig | None = None,
    ) -> "PharosAgentKit":
        """Create a kit signing with a local private key."""
        config = config or AgentConfig()
        client = PharosClient(chain or PharosChains["PHAROS_DEVNET"], rpc_url=rpc_url)
        wallet = LocalWalletProvider(private_key, client, priority_level=config.priority_level)
        return cls(wallet, client, config)

    @property
    def wallet(self) -> WalletProvider:
        return self._wallet

    @property
    def client(self) -> PharosClient:
        """Chain read connection."""
        return self._client

    @property
    def config(self) -> AgentConfig:
        return self._config

    @property
    def wallet_address(self) -> str:
        """Get the agent's wallet address."""
        return self._wallet.address

    # ============================================================================
    # Tokens
    # ============================================================================

    async def get_balance(self, token_address: str | None = None) -> str:
        """Get native or ERC-20 balance of the wallet."""
        return await tools.get_erc20_balance(self, token_address)

    async def transfer(
        self, to: str, amount: str, token_address: str | None = None
    ) -> dict[str, str]:
        """Transfer native or ERC-20 tokens."""
        return await tools.transfer(self, amount, to, token_address)

    async def get_erc721_balance(self, token_address: str) -> str:
        return await tools.get_erc721_balance(self, token_address)

    async def transfer_erc721(self, to: str, token_address: str, token_id: int) -> str:
        return await tools.erc721_transfer(self, to, token_address, token_id)

    async def mint_erc721(self, to: str, token_address: str, token_id: int) -> str:
        return await tools.erc721_mint(self, to, token_address, token_id)

    # ============================================================================
    # DeFiLlama
    # ============================================================================

    async def fetch_token_prices(
        self, chain_token_identifiers: list[str], search_width: str | None = None
    ) -> dict[str, Any]:
        return await tools.fetch_prices(chain_token_identifiers, search_width)

    async def fetch_token_price_by_chain_slug(
        self, token_address: str, chain_slug: str
    ) -> dict[str, Any]:
        return await tools.fetch_prices([f"{chain_slug}:{token_address}"])

    async def fetch_token_price_by_chain_id(
        self, token_address: str, chain_id: int
    ) -> dict[str, Any]:
        return await tools.fetch_token_price_by_chain_id(token_address, chain_id)

    async def fetch_protocol_tvl(self, protocol_name: str) -> dict[str, Any]:
        return await tools.get_protocol_tvl(protocol_name)

    # ============================================================================
    # CoinGecko
    # ============================================================================

    async def get_token_price_data_using_coingecko(
        self, *token_addresses: str, platform: str = "ethereum"
    ) -> dict[str, Any]:
        return await tools.get_token_price_data(self._config, list(token_addresses), platform)

    async def get_trending_tokens_on_coingecko(self) -> dict[str, Any]:
        return await tools.get_trending_tokens(self._config)

    async def get_top_gainers_on_coingecko(
        self, duration: str = "24h", top_coins: str = "all"
    ) -> dict[str, Any]:
        return await tools.get_top_gainers(self._config, duration, top_coins)

    async def get_coingecko_trending_pools(self, duration: str = "24h") -> dict[str, Any]:
        return await tools.get_trending_pools(self._config, duration)

    async def get_coingecko_latest_pools(self) -> dict[str, Any]:
        return await tools.get_latest_pools(self._config)

    # ============================================================================
    # DexScreener
    # ============================================================================

    async def get_token_data_by_ticker(
        self, ticker: str, chain_id: str | None = None
    ) -> dict[str, Any]:
        return await tools.get_token_data_by_ticker(ticker, chain_id)

    # ============================================================================
    # Elfa AI
    # ============================================================================

    async def ping_elfa_ai_api(self) -> Any:
        return await tools.ping_elfa_ai_api(self._config)

    async def get_elfa_ai_api_key_status(self) -> Any:
        return await tools.get_elfa_ai_api_key_status(self._config)

    async def get_smart_mentions(self, limit: int = 100, offset: int = 0) -> Any:
        return await tools.get_smart_mentions(self._config, limit, offset)

    async def get_top_mentions_by_ticker(
        self,
        ticker: str,
        time_window: str = "1h",
        page: int = 1,
        page_size: int = 10,
        include_account_details: bool = False,
    ) -> Any:
        return await tools.get_top_mentions_by_ticker(
            self._config, ticker, time_window, page, page_size, include_account_details
        )

    async def search_mentions_by_keywords(
        self, keywords: str, from_timestamp: int, to_timestamp: int, limit: int = 20
    ) -> Any:
        return await tools.search_mentions_by_keywords(
            self._config, keywords, from_timestamp, to_timestamp, limit
        )

    async def get_trending_tokens_using_elfa_ai(self) -> Any:
        return await tools.get_trending_tokens_using_elfa_ai(self._config)

    async def get_smart_twitter_account_stats(self, username: str) -> Any:
        return await tools.get_smart_twitter_account_stats(self._config, username)

    # ============================================================================
    # Utilities
    # ============================================================================

    def get_info(self) -> dict[str, Any]:
        """Get a summary of the context (without secrets) for debugging."""
        return {
            "address": self.wallet_address,
            "chain_id": self._client.chain_id,
            "rpc_url": self._client.rpc_url,
            "priority_level": self._config.priority_level,
        }
