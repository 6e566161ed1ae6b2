"""Native and ERC-20 token actions."""

from pydantic import BaseModel, Field

from .. import tools
from ..types import ActionExample, success_result
from .base import ActionDefinition


class BalanceInput(BaseModel):
    """Input schema for wallet balance check."""

    contract_address: str | None = Field(
        default=None,
        description="ERC-20 token contract address. Omit for the native ETH balance",
    )


class TransferInput(BaseModel):
    """Input schema for token transfer."""

    amount: str = Field(min_length=1, description="Amount to transfer (e.g. '1.5')")
    recipient: str = Field(description="Recipient wallet address (0x...)")
    token_address: str | None = Field(
        default=None,
        description="ERC-20 token contract address. Omit to transfer ETH",
    )


async def _balance(agent, input: BalanceInput) -> dict:
    balance = await tools.get_erc20_balance(agent, input.contract_address)
    return success_result(balance=balance, token=input.contract_address or "ETH")


async def _transfer(agent, input: TransferInput) -> dict:
    result = await tools.transfer(agent, input.amount, input.recipient, input.token_address)
    return success_result(
        message=f"Transferred {input.amount} to {input.recipient}",
        **result,
    )


erc20_balance_action = ActionDefinition(
    name="PHAROS_ERC20_BALANCE",
    similes=("check balance", "get balance", "token balance", "how much eth do i have"),
    description=(
        "Get the balance of ETH or an ERC-20 token in the agent's wallet. "
        "Returns the native ETH balance when no contract address is given."
    ),
    examples=(
        (
            ActionExample(
                input={},
                output={"status": "success", "balance": "1.5", "token": "ETH"},
                explanation="The wallet holds 1.5 ETH",
            ),
            ActionExample(
                input={"contract_address": "0x68b3465833fb72A70ecDF485E0e4C7bD8665Fc45"},
                output={
                    "status": "success",
                    "balance": "250",
                    "token": "0x68b3465833fb72A70ecDF485E0e4C7bD8665Fc45",
                },
                explanation="The wallet holds 250 units of the token",
            ),
        ),
    ),
    schema=BalanceInput,
    handler=_balance,
)

erc20_transfer_action = ActionDefinition(
    name="PHAROS_ERC20_TRANSFER",
    similes=("send eth", "transfer tokens", "send tokens", "pay"),
    description=(
        "Transfer ETH or ERC-20 tokens from the agent's wallet to another address. "
        "Transfers ETH when no token address is given."
    ),
    examples=(
        (
            ActionExample(
                input={
                    "amount": "0.5",
                    "recipient": "0x742d35Cc6634C0532925a3b844Bc9e7595f12345",
                },
                output={
                    "status": "success",
                    "message": "Transferred 0.5 to 0x742d35Cc6634C0532925a3b844Bc9e7595f12345",
                    "tx_hash": "0x9f2c...e1",
                    "amount": "0.5",
                    "recipient": "0x742d35Cc6634C0532925a3b844Bc9e7595f12345",
                    "token": "ETH",
                },
                explanation="Send 0.5 ETH to the recipient",
            ),
        ),
    ),
    schema=TransferInput,
    handler=_transfer,
)
