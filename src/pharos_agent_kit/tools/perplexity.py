"""Perplexity AI question answering."""

from ..config import AgentConfig
from .http import post_json

PERPLEXITY_CHAT_URL = "https://api.perplexity.ai/chat/completions"
PERPLEXITY_MODEL = "sonar"


async def get_info(config: AgentConfig, question: str) -> str:
    """
    Ask Perplexity AI for up-to-date information about a topic.

    Args:
        config: Agent configuration holding the Perplexity API key
        question: Question or topic to look up

    Returns:
        Answer text from the first completion choice
    """
    if not config.perplexity_api_key:
        raise ValueError("No Perplexity API key provided")

    data = await post_json(
        PERPLEXITY_CHAT_URL,
        json={
            "model": PERPLEXITY_MODEL,
            "messages": [
                {"role": "system", "content": "Be precise and concise."},
                {"role": "user", "content": question},
            ],
        },
        headers={"Authorization": f"Bearer {config.perplexity_api_key}"},
    )
    return data["choices"][0]["message"]["content"]
