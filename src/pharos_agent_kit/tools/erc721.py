"""ERC-721 balance, transfer and mint."""

import logging
from typing import TYPE_CHECKING

from ..types import EVM_ADDRESS_REGEX
from ..utils import decode_uint256, encode_function_call

if TYPE_CHECKING:
    from ..agent import PharosAgentKit

logger = logging.getLogger(__name__)


async def is_contract(agent: "PharosAgentKit", address: str) -> bool:
    """Check whether an address has deployed bytecode."""
    code = await agent.client.get_code(address)
    return code not in ("0x", "0x0", "")


async def get_erc721_balance(agent: "PharosAgentKit", token_address: str) -> str:
    """Get the number of NFTs the wallet holds in a collection."""
    logger.info("Querying NFT balance for %s at %s", agent.wallet_address, token_address)

    if not await is_contract(agent, token_address):
        raise ValueError(f"Address {token_address} is not a contract")

    data = encode_function_call("balanceOf(address)", [agent.wallet_address])
    result = await agent.wallet.read_contract(token_address, data)
    return str(decode_uint256(result))


async def erc721_transfer(
    agent: "PharosAgentKit",
    recipient: str,
    token_address: str,
    token_id: int,
) -> str:
    """Transfer an NFT from the wallet with ``safeTransferFrom``."""
    if not EVM_ADDRESS_REGEX.match(recipient):
        raise ValueError(f"Invalid recipient address: {recipient}")
    if not await is_contract(agent, token_address):
        raise ValueError(f"Address {token_address} is not a contract")

    data = encode_function_call(
        "safeTransferFrom(address,address,uint256)",
        [agent.wallet_address, recipient.lower(), token_id],
    )
    tx_hash = await agent.wallet.send_transaction({"to": token_address, "data": data})
    receipt = await agent.wallet.wait_for_transaction_receipt(tx_hash)
    if not receipt.succeeded:
        raise RuntimeError(f"Transaction {tx_hash} reverted")
    return tx_hash


async def erc721_mint(
    agent: "PharosAgentKit",
    recipient: str,
    token_address: str,
    token_id: int,
) -> str:
    """Mint an NFT to a recipient with ``mint(address,uint256)``."""
    if not EVM_ADDRESS_REGEX.match(recipient):
        raise ValueError(f"Invalid recipient address: {recipient}")
    if not await is_contract(agent, token_address):
        raise ValueError(f"Address {token_address} is not a contract")

    data = encode_function_call("mint(address,uint256)", [recipient.lower(), token_id])
    tx_hash = await agent.wallet.send_transaction({"to": token_address, "data": data})
    receipt = await agent.wallet.wait_for_transaction_receipt(tx_hash)
    if not receipt.succeeded:
        raise RuntimeError(f"Transaction {tx_hash} reverted")
    return tx_hash
