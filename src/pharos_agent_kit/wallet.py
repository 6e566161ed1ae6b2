"""Wallet providers for signing and sending transactions."""

import logging
from typing import Any, Protocol

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_utils import to_checksum_address

from .chains.pharos import PharosClient
from .config import PRIORITY_FEE_MULTIPLIERS, PriorityLevel
from .types import TxReceipt
from .utils import apply_gas_multiplier

logger = logging.getLogger(__name__)


class WalletProvider(Protocol):
    """Protocol for wallet backends used by action handlers."""

    @property
    def address(self) -> str:
        """Checksummed address of the signing account."""
        ...

    def sign_message(self, message: str | bytes) -> str:
        """Sign a message (EIP-191)."""
        ...

    def sign_typed_data(self, typed_data: dict[str, Any]) -> str:
        """Sign EIP-712 typed data."""
        ...

    async def sign_transaction(self, transaction: dict[str, Any]) -> str:
        """Sign a transaction, filling in missing fields."""
        ...

    async def send_transaction(self, transaction: dict[str, Any]) -> str:
        """Sign and broadcast a transaction, returning its hash."""
        ...

    async def wait_for_transaction_receipt(self, tx_hash: str) -> TxReceipt:
        """Wait for a transaction to be mined."""
        ...

    async def read_contract(self, address: str, data: str) -> str:
        """Execute a read-only contract call."""
        ...


class LocalWalletProvider:
    """
    Wallet provider backed by a local private key.

    Example:
        >>> client = PharosClient(PharosChains["PHAROS_DEVNET"])
        >>> wallet = LocalWalletProvider("0x...", client)
        >>> tx_hash = await wallet.send_transaction({"to": "0x...", "value": 10**18})
    """

    def __init__(
        self,
        private_key: str,
        client: PharosClient,
        priority_level: PriorityLevel = "medium",
    ) -> None:
        self._account = Account.from_key(private_key)
        self._client = client
        self._priority_multiplier = PRIORITY_FEE_MULTIPLIERS[priority_level]

    @property
    def address(self) -> str:
        return self._account.address

    @property
    def client(self) -> PharosClient:
        return self._client

    def sign_message(self, message: str | bytes) -> str:
        if isinstance(message, str):
            signable = encode_defunct(text=message)
        else:
            signable = encode_defunct(primitive=message)
        return "0x" + self._account.sign_message(signable).signature.hex().removeprefix("0x")

    def sign_typed_data(self, typed_data: dict[str, Any]) -> str:
        signed = self._account.sign_typed_data(full_message=typed_data)
        return "0x" + signed.signature.hex().removeprefix("0x")

    async def sign_transaction(self, transaction: dict[str, Any]) -> str:
        tx = await self._prepare_transaction(transaction)
        signed = self._account.sign_transaction(tx)
        return "0x" + signed.raw_transaction.hex().removeprefix("0x")

    async def send_transaction(self, transaction: dict[str, Any]) -> str:
        raw_tx = await self.sign_transaction(transaction)
        result = await self._client.send_raw_transaction(raw_tx)
        logger.info("Sent transaction %s", result.hash)
        return result.hash

    async def wait_for_transaction_receipt(self, tx_hash: str) -> TxReceipt:
        return await self._client.wait_for_transaction_receipt(tx_hash)

    async def read_contract(self, address: str, data: str) -> str:
        return await self._client.call(address, data, from_address=self.address)

    async def _prepare_transaction(self, transaction: dict[str, Any]) -> dict[str, Any]:
        """Fill chain id, nonce and EIP-1559 gas fields."""
        tx: dict[str, Any] = {
            "type": 2,
            "chainId": self._client.chain_id,
            "to": to_checksum_address(transaction["to"]),
            "value": int(transaction.get("value", 0)),
            "data": transaction.get("data") or "0x",
        }

        tx["nonce"] = transaction.get("nonce")
        if tx["nonce"] is None:
            tx["nonce"] = await self._client.get_nonce(self.address)

        gas_prices = await self._client.get_gas_prices()
        priority_fee = transaction.get("maxPriorityFeePerGas") or apply_gas_multiplier(
            gas_prices["max_priority_fee_per_gas"], self._priority_multiplier
        )
        tx["maxPriorityFeePerGas"] = priority_fee
        tx["maxFeePerGas"] = transaction.get("maxFeePerGas") or (
            gas_prices["base_fee"] * 2 + priority_fee
        )

        tx["gas"] = transaction.get("gas")
        if tx["gas"] is None:
            estimated = await self._client.estimate_gas({
                "from": self.address,
                "to": tx["to"],
                "value": tx["value"],
                "data": tx["data"],
            })
            tx["gas"] = apply_gas_multiplier(estimated, 1.2)  # 20% buffer

        return tx
