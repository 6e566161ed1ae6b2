"""Pharos chain client."""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any

import httpx

from ..types import Balance, ChainError, EVM_ADDRESS_REGEX, TxHash, TxReceipt
from ..utils import format_units

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PharosChainConfig:
    """Pharos chain configuration."""

    chain_id: int
    name: str
    rpc_url: str
    symbol: str
    decimals: int = 18
    explorer_url: str | None = None


# Pre-configured chain configs
PharosChains = {
    "PHAROS_DEVNET": PharosChainConfig(
        chain_id=50002,
        name="Pharos Devnet",
        rpc_url="https://devnet.dplabs-internal.com",
        symbol="ETH",
        explorer_url="https://pharosscan.xyz",
    ),
}


class PharosClient:
    """
    JSON-RPC read/broadcast connection to a Pharos node.

    Example:
        >>> client = PharosClient(PharosChains["PHAROS_DEVNET"])
        >>>
        >>> # Get balance
        >>> balance = await client.get_balance("0x...")
        >>> balance.formatted
        '1.5 ETH'
    """

    def __init__(
        self,
        config: PharosChainConfig,
        rpc_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._rpc_url = rpc_url or config.rpc_url
        self._transport = transport
        self._request_id = 0

    @property
    def config(self) -> PharosChainConfig:
        return self._config

    @property
    def chain_id(self) -> int:
        """Get chain ID."""
        return self._config.chain_id

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    async def get_balance(self, address: str) -> Balance:
        """Get native balance for an address."""
        result = await self._rpc_call("eth_getBalance", [address, "latest"])
        raw_value = int(result, 16)

        return Balance(
            raw=raw_value,
            formatted=f"{format_units(raw_value, self._config.decimals)} {self._config.symbol}",
            symbol=self._config.symbol,
            decimals=self._config.decimals,
        )

    async def get_code(self, address: str) -> str:
        """Get deployed bytecode at an address ("0x" for accounts)."""
        return await self._rpc_call("eth_getCode", [address, "latest"])

    async def call(self, to: str, data: str, from_address: str | None = None) -> str:
        """Execute a read-only contract call."""
        tx: dict[str, Any] = {"to": to, "data": data}
        if from_address:
            tx["from"] = from_address
        return await self._rpc_call("eth_call", [tx, "latest"])

    async def get_nonce(self, address: str) -> int:
        """Get pending nonce for an address."""
        result = await self._rpc_call("eth_getTransactionCount", [address, "pending"])
        return int(result, 16)

    async def get_gas_prices(self) -> dict[str, int]:
        """Get current gas prices (EIP-1559)."""
        block = await self._rpc_call("eth_getBlockByNumber", ["latest", False])
        base_fee = int(block.get("baseFeePerGas", "0x0"), 16)

        try:
            priority_fee = await self._rpc_call("eth_maxPriorityFeePerGas", [])
            max_priority_fee = int(priority_fee, 16)
        except ChainError:
            max_priority_fee = 1_000_000_000  # Default to 1 gwei

        return {
            "base_fee": base_fee,
            "max_fee_per_gas": base_fee * 2 + max_priority_fee,
            "max_priority_fee_per_gas": max_priority_fee,
        }

    async def estimate_gas(self, tx: dict[str, Any]) -> int:
        """Estimate gas for a transaction."""
        params = {key: value for key, value in tx.items() if value is not None}
        if isinstance(params.get("value"), int):
            params["value"] = hex(params["value"])
        result = await self._rpc_call("eth_estimateGas", [params])
        return int(result, 16)

    async def send_raw_transaction(self, raw_tx: bytes | str) -> TxHash:
        """Broadcast a signed transaction."""
        if isinstance(raw_tx, bytes):
            raw_tx = "0x" + raw_tx.hex()
        result = await self._rpc_call("eth_sendRawTransaction", [raw_tx])
        return TxHash(hash=result, explorer_url=self.get_explorer_tx_url(result))

    async def get_transaction_receipt(self, tx_hash: str) -> TxReceipt | None:
        """Get a transaction receipt, or None while pending."""
        receipt = await self._rpc_call("eth_getTransactionReceipt", [tx_hash])
        if not receipt:
            return None
        return TxReceipt(
            tx_hash=tx_hash,
            block_number=int(receipt["blockNumber"], 16),
            status="success" if receipt["status"] == "0x1" else "reverted",
            gas_used=int(receipt["gasUsed"], 16),
            effective_gas_price=int(receipt.get("effectiveGasPrice", "0x0"), 16),
            logs=receipt.get("logs", []),
        )

    async def wait_for_transaction_receipt(
        self, tx_hash: str, timeout_secs: int = 60, poll_interval: float = 1.0
    ) -> TxReceipt:
        """Wait for transaction confirmation."""
        start_time = time.monotonic()

        while time.monotonic() - start_time < timeout_secs:
            receipt = await self.get_transaction_receipt(tx_hash)
            if receipt:
                return receipt
            await asyncio.sleep(poll_interval)

        raise TimeoutError(f"Transaction {tx_hash} not confirmed within timeout")

    def is_valid_address(self, address: str) -> bool:
        """Check if an address is valid."""
        return bool(EVM_ADDRESS_REGEX.match(address))

    def get_explorer_tx_url(self, tx_hash: str) -> str | None:
        """Get explorer URL for a transaction."""
        if not self._config.explorer_url:
            return None
        return f"{self._config.explorer_url}/tx/{tx_hash}"

    def get_explorer_address_url(self, address: str) -> str | None:
        """Get explorer URL for an address."""
        if not self._config.explorer_url:
            return None
        return f"{self._config.explorer_url}/address/{address}"

    async def _rpc_call(self, method: str, params: list[Any]) -> Any:
        """Make a single JSON-RPC call."""
        self._request_id += 1

        async with httpx.AsyncClient(timeout=30.0, transport=self._transport) as client:
            try:
                response = await client.post(
                    self._rpc_url,
                    json={
                        "jsonrpc": "2.0",
                        "method": method,
                        "params": params,
                        "id": self._request_id,
                    },
                )
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPError as e:
                raise ChainError(f"RPC request {method} failed: {e}", cause=e) from e

        if "error" in data:
            message = data["error"].get("message", "RPC error")
            raise ChainError(f"RPC {method} returned an error: {message}")

        return data["result"]
