"""
LangChain tool adapter for Pharos Agent Kit actions.

Every registered action becomes one ``StructuredTool`` built by the same
adapter function; invocation funnels through ``execute_action`` and always
returns the JSON-encoded result envelope.
"""

import asyncio
import json
import logging
from typing import Any

from langchain_core.tools import StructuredTool
from pydantic import ValidationError

from ..actions import ActionDefinition, create_action_registry
from ..agent import PharosAgentKit
from ..executor import execute_action, to_action_validation_error
from ..registry import ActionRegistry
from ..schema import translate_schema
from ..types import SchemaTranslationError, error_result

logger = logging.getLogger(__name__)


def action_to_tool(
    action: ActionDefinition,
    registry: ActionRegistry,
    agent: PharosAgentKit,
) -> StructuredTool:
    """
    Expose one action as a LangChain tool.

    Args:
        action: Action to expose; its name and description are used verbatim
        registry: Registry the action is dispatched through
        agent: Execution context passed to the handler

    Returns:
        StructuredTool whose sync and async paths return a JSON string
    """

    async def _acall(**kwargs: Any) -> str:
        result = await execute_action(registry, action.name, kwargs, agent)
        return json.dumps(result, default=str)

    def _call(**kwargs: Any) -> str:
        return asyncio.run(_acall(**kwargs))

    def _invalid_input(error: ValidationError) -> str:
        # Arguments are validated by the tool before _call runs
        return json.dumps(error_result(to_action_validation_error(action.name, error).message))

    return StructuredTool.from_function(
        func=_call,
        coroutine=_acall,
        name=action.name,
        description=action.description,
        args_schema=action.schema,
        handle_validation_error=_invalid_input,
    )


def create_pharos_tools(
    agent: PharosAgentKit,
    registry: ActionRegistry | None = None,
) -> list[StructuredTool]:
    """
    Create a list of LangChain tools for every registered action.

    Actions whose schema cannot be translated are skipped with a warning.

    Args:
        agent: Initialized PharosAgentKit instance
        registry: Actions to expose (defaults to the built-in actions)

    Returns:
        List of LangChain tools in registry order
    """
    if registry is None:
        registry = create_action_registry()

    tools = []
    for action in registry:
        try:
            translate_schema(action.schema)
        except SchemaTranslationError as e:
            logger.warning("Skipping action %s: %s", action.name, e)
            continue
        tools.append(action_to_tool(action, registry, agent))

    return tools


class PharosTools:
    """
    Class-based access to the tool list.

    Example:
        tools = PharosTools(agent)
        agent_graph = create_agent(llm, tools.get_tools())
    """

    def __init__(self, agent: PharosAgentKit, registry: ActionRegistry | None = None):
        self.agent = agent
        self.registry = registry if registry is not None else create_action_registry()

    def get_tools(self) -> list[StructuredTool]:
        """Get configured tools list."""
        return create_pharos_tools(self.agent, self.registry)

    def get_tool(self, name: str) -> StructuredTool:
        """Get the tool for a single action."""
        return action_to_tool(self.registry.get(name), self.registry, self.agent)
