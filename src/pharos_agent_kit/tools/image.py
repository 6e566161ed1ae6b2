"""OpenAI image generation."""

from openai import AsyncOpenAI

from ..config import AgentConfig

IMAGE_MODEL = "dall-e-3"


async def create_image(config: AgentConfig, prompt: str, size: str = "1024x1024") -> list[str]:
    """Generate an image and return the URLs the API hosts it at."""
    if not config.openai_api_key:
        raise ValueError("No OpenAI API key provided")

    async with AsyncOpenAI(api_key=config.openai_api_key) as client:
        response = await client.images.generate(model=IMAGE_MODEL, prompt=prompt, n=1, size=size)
    return [image.url for image in response.data]
