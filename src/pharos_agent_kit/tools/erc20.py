"""Native and ERC-20 token balance and transfer."""

import logging
from typing import TYPE_CHECKING

from ..types import EVM_ADDRESS_REGEX
from ..utils import decode_uint256, encode_function_call, format_units, parse_units

if TYPE_CHECKING:
    from ..agent import PharosAgentKit

logger = logging.getLogger(__name__)

NATIVE_DECIMALS = 18


async def get_token_decimals(agent: "PharosAgentKit", token_address: str) -> int:
    """Read ``decimals()`` from an ERC-20 contract."""
    result = await agent.wallet.read_contract(token_address, encode_function_call("decimals()"))
    return decode_uint256(result)


async def get_erc20_raw_balance(agent: "PharosAgentKit", token_address: str) -> int:
    """Read ``balanceOf(wallet)`` from an ERC-20 contract."""
    data = encode_function_call("balanceOf(address)", [agent.wallet_address])
    result = await agent.wallet.read_contract(token_address, data)
    return decode_uint256(result)


async def get_erc20_balance(agent: "PharosAgentKit", contract_address: str | None = None) -> str:
    """
    Get the wallet balance of the native token or an ERC-20 token.

    Args:
        agent: Execution context
        contract_address: ERC-20 contract; native balance when omitted

    Returns:
        Human-readable balance, e.g. "1.5"
    """
    logger.info(
        "Querying balance of %s for %s", contract_address or "ETH", agent.wallet_address
    )

    if not contract_address:
        balance = await agent.client.get_balance(agent.wallet_address)
        return format_units(balance.raw, NATIVE_DECIMALS)

    raw = await get_erc20_raw_balance(agent, contract_address)
    decimals = await get_token_decimals(agent, contract_address)
    return format_units(raw, decimals)


async def transfer(
    agent: "PharosAgentKit",
    amount: str,
    recipient: str,
    token_address: str | None = None,
) -> dict[str, str]:
    """
    Transfer native tokens or ERC-20 tokens.

    Args:
        agent: Execution context
        amount: Amount as a decimal string (e.g. "1.5")
        recipient: Recipient address
        token_address: ERC-20 contract; native transfer when omitted

    Returns:
        Dict with the transaction hash and transfer details
    """
    if not EVM_ADDRESS_REGEX.match(recipient):
        raise ValueError(f"Invalid recipient address: {recipient}")

    logger.info("Transferring %s %s to %s", amount, token_address or "ETH", recipient)

    if not token_address:
        value = parse_units(amount, NATIVE_DECIMALS)
        if value <= 0:
            raise ValueError("Transfer amount must be greater than 0")

        balance = await agent.client.get_balance(agent.wallet_address)
        if balance.raw < value:
            raise ValueError("Insufficient ETH balance")

        tx_hash = await agent.wallet.send_transaction({"to": recipient, "value": value})
        receipt = await agent.wallet.wait_for_transaction_receipt(tx_hash)
        if not receipt.succeeded:
            raise RuntimeError(f"Transaction {tx_hash} reverted")

        return {"tx_hash": tx_hash, "amount": amount, "recipient": recipient, "token": "ETH"}

    decimals = await get_token_decimals(agent, token_address)
    value = parse_units(amount, decimals)
    if value <= 0:
        raise ValueError("Transfer amount must be greater than 0")

    token_balance = await get_erc20_raw_balance(agent, token_address)
    if token_balance < value:
        raise ValueError(f"Insufficient balance for token: {token_address}")

    tx_hash = await agent.wallet.send_transaction({
        "to": token_address,
        "data": encode_function_call("transfer(address,uint256)", [recipient.lower(), value]),
    })

    return {"tx_hash": tx_hash, "amount": amount, "recipient": recipient, "token": token_address}
