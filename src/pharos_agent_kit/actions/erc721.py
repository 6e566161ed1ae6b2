"""ERC-721 NFT actions."""

from pydantic import BaseModel, Field

from .. import tools
from ..types import ActionExample, success_result
from .base import ActionDefinition


class NftBalanceInput(BaseModel):
    """Input schema for NFT balance check."""

    token_address: str = Field(description="ERC-721 collection contract address")


class NftTransferInput(BaseModel):
    """Input schema for NFT transfer and mint."""

    recipient: str = Field(description="Recipient wallet address (0x...)")
    token_address: str = Field(description="ERC-721 collection contract address")
    token_id: int = Field(ge=0, description="Token id within the collection")


async def _balance(agent, input: NftBalanceInput) -> dict:
    balance = await tools.get_erc721_balance(agent, input.token_address)
    return success_result(balance=balance, token_address=input.token_address)


async def _transfer(agent, input: NftTransferInput) -> dict:
    tx_hash = await tools.erc721_transfer(
        agent, input.recipient, input.token_address, input.token_id
    )
    return success_result(
        message=f"Transferred token {input.token_id} to {input.recipient}",
        tx_hash=tx_hash,
    )


async def _mint(agent, input: NftTransferInput) -> dict:
    tx_hash = await tools.erc721_mint(agent, input.recipient, input.token_address, input.token_id)
    return success_result(
        message=f"Minted token {input.token_id} to {input.recipient}",
        tx_hash=tx_hash,
    )


_COLLECTION = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
_RECIPIENT = "0x742d35Cc6634C0532925a3b844Bc9e7595f12345"

erc721_balance_action = ActionDefinition(
    name="PHAROS_ERC721_BALANCE",
    similes=("nft balance", "how many nfts", "check nft balance"),
    description="Get the number of NFTs the agent's wallet holds in an ERC-721 collection",
    examples=(
        (
            ActionExample(
                input={"token_address": _COLLECTION},
                output={"status": "success", "balance": "3", "token_address": _COLLECTION},
                explanation="The wallet holds 3 NFTs from the collection",
            ),
        ),
    ),
    schema=NftBalanceInput,
    handler=_balance,
)

erc721_transfer_action = ActionDefinition(
    name="PHAROS_ERC721_TRANSFER",
    similes=("send nft", "transfer nft", "give nft"),
    description="Transfer an NFT from the agent's wallet to another address",
    examples=(
        (
            ActionExample(
                input={"recipient": _RECIPIENT, "token_address": _COLLECTION, "token_id": 7},
                output={
                    "status": "success",
                    "message": f"Transferred token 7 to {_RECIPIENT}",
                    "tx_hash": "0x4b1d...a9",
                },
                explanation="Send NFT #7 of the collection to the recipient",
            ),
        ),
    ),
    schema=NftTransferInput,
    handler=_transfer,
)

erc721_mint_action = ActionDefinition(
    name="PHAROS_ERC721_MINT",
    similes=("mint nft", "create nft", "mint token"),
    description="Mint an NFT from an ERC-721 collection to a recipient address",
    examples=(
        (
            ActionExample(
                input={"recipient": _RECIPIENT, "token_address": _COLLECTION, "token_id": 8},
                output={
                    "status": "success",
                    "message": f"Minted token 8 to {_RECIPIENT}",
                    "tx_hash": "0x77c0...3e",
                },
                explanation="Mint NFT #8 of the collection to the recipient",
            ),
        ),
    ),
    schema=NftTransferInput,
    handler=_mint,
)
