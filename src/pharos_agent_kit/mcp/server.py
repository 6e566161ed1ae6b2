"""
MCP server adapter for Pharos Agent Kit actions.

Each registered action becomes one MCP tool; actions that carry examples
also get a ``<name>-examples`` prompt for browsing them.
"""

import json
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import (
    CallToolResult,
    GetPromptResult,
    Prompt,
    PromptArgument,
    PromptMessage,
    TextContent,
    Tool,
)

from ..actions import ActionDefinition, create_action_registry
from ..agent import PharosAgentKit
from ..executor import execute_action
from ..registry import ActionRegistry
from ..schema import shape_to_json_schema, translate_schema
from ..types import HandlerError, SchemaTranslationError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_SERVER_NAME = "pharos-agent-kit"
DEFAULT_SERVER_VERSION = "0.1.0"
EXAMPLES_PROMPT_SUFFIX = "-examples"


class ActionMcpServer:
    """
    MCP server exposing registered actions as tools and example prompts.

    Example:
        >>> server = ActionMcpServer(create_action_registry(), agent)
        >>> [tool.name for tool in server.list_tools()][:1]
        ['GET_WALLET_ADDRESS']
    """

    def __init__(
        self,
        registry: ActionRegistry,
        agent: PharosAgentKit,
        name: str = DEFAULT_SERVER_NAME,
        version: str = DEFAULT_SERVER_VERSION,
    ):
        self.registry = registry
        self.agent = agent
        self.server = Server(name, version=version)
        self.registered_actions: list[str] = []

        self._tools: list[Tool] = []
        self._prompts: list[Prompt] = []
        self._prompt_actions: dict[str, ActionDefinition] = {}

        for action in registry:
            self._register_action(action)

        self._attach_handlers()

    def _register_action(self, action: ActionDefinition) -> None:
        try:
            shape = translate_schema(action.schema)
        except SchemaTranslationError as e:
            logger.warning("Skipping action %s: %s", action.name, e)
            return

        self._tools.append(
            Tool(
                name=action.name,
                description=action.description,
                inputSchema=shape_to_json_schema(shape),
            )
        )

        if action.has_examples():
            prompt_name = f"{action.name}{EXAMPLES_PROMPT_SUFFIX}"
            self._prompts.append(
                Prompt(
                    name=prompt_name,
                    description=f"Examples for {action.name}",
                    arguments=[
                        PromptArgument(
                            name="showIndex",
                            description="Example index to show (number)",
                            required=False,
                        )
                    ],
                )
            )
            self._prompt_actions[prompt_name] = action

        self.registered_actions.append(action.name)

    def _attach_handlers(self) -> None:
        server = self.server

        @server.list_tools()
        async def _list_tools() -> list[Tool]:
            return self.list_tools()

        @server.call_tool(validate_input=False)
        async def _call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
            result = await self.call_tool(name, arguments)
            if result.isError:
                # The server turns raised errors into isError tool results
                raise HandlerError(result.content[0].text)
            return result.content

        @server.list_prompts()
        async def _list_prompts() -> list[Prompt]:
            return self.list_prompts()

        @server.get_prompt()
        async def _get_prompt(name: str, arguments: dict[str, str] | None) -> GetPromptResult:
            return self.get_prompt(name, arguments)

    # ============================================================================
    # Tools
    # ============================================================================

    def list_tools(self) -> list[Tool]:
        """Get one tool per registered action, in registry order."""
        return list(self._tools)

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> CallToolResult:
        """
        Invoke an action through the executor.

        Returns:
            The result envelope as indented JSON text, or an error result
            carrying the fault message if execution itself failed
        """
        try:
            result = await execute_action(self.registry, name, arguments, self.agent)
            text = json.dumps(result, indent=2, default=str)
        except Exception as e:
            logger.error("Tool %s failed: %s", name, e, exc_info=True)
            return CallToolResult(
                content=[TextContent(type="text", text=str(e) or e.__class__.__name__)],
                isError=True,
            )

        return CallToolResult(content=[TextContent(type="text", text=text)])

    # ============================================================================
    # Prompts
    # ============================================================================

    def list_prompts(self) -> list[Prompt]:
        """Get the example prompts of every action that has examples."""
        return list(self._prompts)

    def get_prompt(self, name: str, arguments: dict[str, str] | None = None) -> GetPromptResult:
        """
        Render the examples of an action.

        Args:
            name: Prompt name (``<action>-examples``)
            arguments: Optional ``showIndex`` selecting a single example

        Raises:
            ValueError: Unknown prompt, or a non-numeric or out-of-range index
        """
        action = self._prompt_actions.get(name)
        if action is None:
            raise ValueError(f"Unknown prompt: {name}")

        examples = action.flat_examples()
        show_index = (arguments or {}).get("showIndex")

        if show_index is None:
            selected = list(examples)
        else:
            try:
                index = int(show_index)
            except (TypeError, ValueError):
                raise ValueError(f"showIndex must be a number, got {show_index!r}") from None
            if not 0 <= index < len(examples):
                raise ValueError(
                    f"showIndex {index} out of range for {action.name} ({len(examples)} examples)"
                )
            selected = [examples[index]]

        text = f"Examples for {action.name}:\n"
        # Headings number the selected examples from 1
        for i, example in enumerate(selected, 1):
            text += (
                f"\nExample {i}:\n"
                f"Input: {json.dumps(example.input, indent=2)}\n"
                f"Output: {json.dumps(example.output, indent=2)}\n"
                f"Explanation: {example.explanation}\n"
            )

        return GetPromptResult(
            description=f"Examples for {action.name}",
            messages=[
                PromptMessage(role="user", content=TextContent(type="text", text=text)),
            ],
        )


def create_mcp_server(
    agent: PharosAgentKit,
    registry: ActionRegistry | None = None,
    name: str = DEFAULT_SERVER_NAME,
    version: str = DEFAULT_SERVER_VERSION,
) -> ActionMcpServer:
    """Create an MCP server for the given actions (defaults to the built-in ones)."""
    if registry is None:
        registry = create_action_registry()
    return ActionMcpServer(registry, agent, name, version)


async def start_mcp_server(
    agent: PharosAgentKit,
    registry: ActionRegistry | None = None,
    name: str = DEFAULT_SERVER_NAME,
    version: str = DEFAULT_SERVER_VERSION,
) -> ActionMcpServer:
    """
    Serve the actions over stdio until the client disconnects.

    Raises:
        TransportError: The stdio transport could not be attached or failed
    """
    mcp_server = create_mcp_server(agent, registry, name, version)
    logger.info(
        "Starting MCP server %s with %d tools", name, len(mcp_server.registered_actions)
    )

    try:
        async with stdio_server() as (read_stream, write_stream):
            await mcp_server.server.run(
                read_stream,
                write_stream,
                mcp_server.server.create_initialization_options(),
            )
    except Exception as e:
        logger.error("MCP server transport failed: %s", e, exc_info=True)
        raise TransportError(f"MCP server transport failed: {e}", cause=e) from e

    return mcp_server
