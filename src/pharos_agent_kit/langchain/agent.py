"""
LangChain agent setup for Pharos Agent Kit
"""

from typing import Any

from langchain.agents import create_agent
from langchain_openai import ChatOpenAI

from ..agent import PharosAgentKit
from ..registry import ActionRegistry
from .prompts import PHAROS_SYSTEM_PROMPT
from .tools import create_pharos_tools


def create_pharos_agent(
    agent: PharosAgentKit,
    model: str = "gpt-4o",
    temperature: float = 0,
    registry: ActionRegistry | None = None,
    checkpointer: Any = None,
    debug: bool = False,
):
    """
    Create a LangChain agent with Pharos tools.

    Args:
        agent: Initialized PharosAgentKit instance
        model: OpenAI model to use (default: gpt-4o)
        temperature: LLM temperature
        registry: Actions to expose (defaults to the built-in actions)
        checkpointer: Optional LangGraph checkpointer for conversation memory
        debug: Whether to print agent steps

    Returns:
        Compiled agent graph; call ``ainvoke({"messages": [...]})`` on it
    """
    llm_kwargs: dict[str, Any] = {"model": model, "temperature": temperature}
    if agent.config.openai_api_key:
        llm_kwargs["api_key"] = agent.config.openai_api_key
    llm = ChatOpenAI(**llm_kwargs)

    tools = create_pharos_tools(agent, registry)

    return create_agent(
        model=llm,
        tools=tools,
        system_prompt=PHAROS_SYSTEM_PROMPT,
        checkpointer=checkpointer,
        debug=debug,
    )
