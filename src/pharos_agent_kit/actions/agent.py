"""Agent wallet and assistant actions."""

from typing import Literal

from pydantic import BaseModel, Field

from .. import tools
from ..types import ActionExample, success_result
from .base import ActionDefinition, EmptyInput


async def _get_wallet_address(agent, input: EmptyInput) -> dict:
    return success_result(address=agent.wallet_address)


get_wallet_address_action = ActionDefinition(
    name="GET_WALLET_ADDRESS",
    similes=("wallet address", "address", "wallet"),
    description="Get wallet address of the agent",
    examples=(
        (
            ActionExample(
                input={},
                output={
                    "status": "success",
                    "address": "0x742d35Cc6634C0532925a3b844Bc9e7595f12345",
                },
                explanation="The agent's wallet address is 0x742d35Cc6634C0532925a3b844Bc9e7595f12345",
            ),
        ),
    ),
    schema=EmptyInput,
    handler=_get_wallet_address,
)


class GetInfoInput(BaseModel):
    """Input schema for a Perplexity lookup."""

    value: str = Field(min_length=1, description="Question or topic to get information about")


async def _get_info(agent, input: GetInfoInput) -> dict:
    content = await tools.get_info(agent.config, input.value.strip())
    return success_result(message="Information retrieved successfully", content=content)


get_info_action = ActionDefinition(
    name="GET_INFO",
    similes=(
        "get information",
        "look up",
        "search the web",
        "latest news about",
    ),
    description=(
        "Get detailed and latest information about any topic using Perplexity AI. "
        "Input should be a question or topic."
    ),
    examples=(
        (
            ActionExample(
                input={"value": "What is the Pharos network?"},
                output={
                    "status": "success",
                    "message": "Information retrieved successfully",
                    "content": "Pharos is an EVM-compatible layer-1 blockchain ...",
                },
                explanation="Ask Perplexity AI about the Pharos network",
            ),
        ),
    ),
    schema=GetInfoInput,
    handler=_get_info,
)


class CreateImageInput(BaseModel):
    """Input schema for image generation."""

    prompt: str = Field(min_length=1, max_length=1000, description="Text description of the image")
    size: Literal["1024x1024", "1792x1024", "1024x1792"] = Field(
        default="1024x1024",
        description="Image dimensions",
    )


async def _create_image(agent, input: CreateImageInput) -> dict:
    images = await tools.create_image(agent.config, input.prompt.strip(), input.size)
    return success_result(message="Image created successfully", images=images)


create_image_action = ActionDefinition(
    name="CREATE_IMAGE",
    similes=(
        "generate image",
        "create artwork",
        "make a picture",
        "draw",
    ),
    description="Create an image using OpenAI's DALL-E from a text prompt",
    examples=(
        (
            ActionExample(
                input={"prompt": "A sunset over the ocean, digital art"},
                output={
                    "status": "success",
                    "message": "Image created successfully",
                    "images": ["https://example.com/image.png"],
                },
                explanation="Generate one square image of a sunset",
            ),
        ),
    ),
    schema=CreateImageInput,
    handler=_create_image,
)
