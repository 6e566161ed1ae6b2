"""
tests/test_langchain.py

Tests for the LangChain tool adapter.
"""
import json
from typing import Any

from pydantic import BaseModel

from pharos_agent_kit import (
    ACTIONS,
    ActionDefinition,
    ActionRegistry,
    AgentConfig,
    PharosAgentKit,
    success_result,
)
from pharos_agent_kit.langchain import (
    PHAROS_SYSTEM_PROMPT,
    PharosTools,
    action_to_tool,
    create_pharos_agent,
    create_pharos_tools,
)
from conftest import TEST_PRIVATE_KEY


class LooseInput(BaseModel):
    payload: Any


async def failing_handler(agent, input) -> dict:
    raise ValueError("Insufficient ETH balance")


class TestActionToTool:
    """One tool per action through a single adapter"""

    def test_name_and_description_verbatim(self, registry, echo_action):
        """Test that the tool mirrors the action metadata"""
        tool = action_to_tool(echo_action, registry, agent=object())

        assert tool.name == "ECHO"
        assert tool.description == "Echo a message back"
        assert tool.args_schema is echo_action.schema

    async def test_ainvoke_returns_envelope_json(self, registry, echo_action):
        """Test the async path"""
        tool = action_to_tool(echo_action, registry, agent=object())

        output = await tool.ainvoke({"msg": "hi"})

        assert json.loads(output) == {"status": "success", "msg": "hi"}

    def test_invoke_returns_envelope_json(self, registry, ping_action):
        """Test the sync path"""
        tool = action_to_tool(ping_action, registry, agent=object())

        output = tool.invoke({})

        assert json.loads(output) == {"status": "success", "pong": True}

    async def test_invalid_input_returns_error_envelope(self, registry, echo_action):
        """Test that bad arguments come back as an error envelope"""
        tool = action_to_tool(echo_action, registry, agent=object())

        output = json.loads(await tool.ainvoke({}))

        assert output["status"] == "error"
        assert "msg" in output["message"]

    async def test_handler_error_returns_error_envelope(self, ping_action):
        """Test that handler faults never escape the tool"""
        action = ActionDefinition(
            name="BROKEN",
            description="Always fails",
            schema=ping_action.schema,
            handler=failing_handler,
        )
        registry = ActionRegistry([action])
        tool = action_to_tool(action, registry, agent=object())

        output = json.loads(await tool.ainvoke({}))

        assert output == {"status": "error", "message": "Insufficient ETH balance"}

    async def test_context_passed(self, empty_input_action, agent):
        """Test that the agent kit reaches the handler"""
        registry = ActionRegistry([empty_input_action])
        tool = action_to_tool(empty_input_action, registry, agent)

        output = json.loads(await tool.ainvoke({}))

        assert output == {"status": "success", "address": agent.wallet_address}


class TestCreateTools:
    """Tool list creation"""

    def test_all_builtin_tools(self, agent):
        """Test that every built-in action becomes a tool"""
        tools = create_pharos_tools(agent)

        assert [tool.name for tool in tools] == [action.name for action in ACTIONS]

    def test_untranslatable_action_skipped(self, ping_action, agent):
        """Test that a schema failure skips only that action"""
        loose = ActionDefinition(
            name="LOOSE",
            description="Accepts anything",
            schema=LooseInput,
            handler=failing_handler,
        )
        registry = ActionRegistry([loose, ping_action])

        tools = create_pharos_tools(agent, registry)

        assert [tool.name for tool in tools] == ["PING"]

    def test_class_interface(self, registry, agent):
        """Test the class-based accessor"""
        pharos_tools = PharosTools(agent, registry)

        assert [tool.name for tool in pharos_tools.get_tools()] == ["PING", "ECHO"]
        assert pharos_tools.get_tool("ECHO").name == "ECHO"


class TestCreateAgent:
    """Agent graph construction"""

    def test_builds_graph(self):
        """Test that an agent graph is built without calling the model"""
        agent = PharosAgentKit.from_private_key(
            TEST_PRIVATE_KEY, config=AgentConfig(openai_api_key="sk-test")
        )

        graph = create_pharos_agent(agent)

        assert hasattr(graph, "ainvoke")

    def test_system_prompt_mentions_network(self):
        """Test the prompt describes the Pharos network"""
        assert "Pharos" in PHAROS_SYSTEM_PROMPT
        assert "50002" in PHAROS_SYSTEM_PROMPT
