"""
Shared fixtures
"""
import json
from typing import Any

import httpx
import pytest
from pydantic import BaseModel, Field

from pharos_agent_kit import (
    ActionDefinition,
    ActionExample,
    ActionRegistry,
    AgentConfig,
    EmptyInput,
    LocalWalletProvider,
    PharosAgentKit,
    PharosChains,
    PharosClient,
    success_result,
)

# Well-known local development key, never funded on a public network
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
RECIPIENT = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


class RpcStub:
    """JSON-RPC node stand-in for httpx.MockTransport."""

    def __init__(self, results: dict[str, Any] | None = None):
        self.results = dict(results or {})
        self.calls: list[tuple[str, list[Any]]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.calls.append((body["method"], body["params"]))

        if body["method"] not in self.results:
            return httpx.Response(
                200,
                json={
                    "jsonrpc": "2.0",
                    "id": body["id"],
                    "error": {"code": -32601, "message": "method not found"},
                },
            )

        result = self.results[body["method"]]
        if callable(result):
            result = result(body["params"])
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

    @property
    def methods(self) -> list[str]:
        return [method for method, _ in self.calls]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


class PingInput(BaseModel):
    pass


class EchoInput(BaseModel):
    msg: str = Field(description="Message to echo back")


async def ping_handler(agent, input: PingInput) -> dict:
    return success_result(pong=True)


async def echo_handler(agent, input: EchoInput) -> dict:
    return success_result(msg=input.msg)


@pytest.fixture
def ping_action() -> ActionDefinition:
    return ActionDefinition(
        name="PING",
        description="Check that the agent is alive",
        schema=PingInput,
        handler=ping_handler,
    )


@pytest.fixture
def echo_action() -> ActionDefinition:
    return ActionDefinition(
        name="ECHO",
        description="Echo a message back",
        schema=EchoInput,
        handler=echo_handler,
        examples=(
            (
                ActionExample(
                    input={"msg": "hello"},
                    output={"status": "success", "msg": "hello"},
                    explanation="Echo hello",
                ),
                ActionExample(
                    input={"msg": "bye"},
                    output={"status": "success", "msg": "bye"},
                    explanation="Echo bye",
                ),
            ),
        ),
    )


@pytest.fixture
def registry(ping_action, echo_action) -> ActionRegistry:
    return ActionRegistry([ping_action, echo_action])


@pytest.fixture
def config() -> AgentConfig:
    return AgentConfig(
        openai_api_key="openai-key",
        perplexity_api_key="pplx-key",
        coingecko_demo_api_key="demo-key",
        elfa_ai_api_key="elfa-key",
    )


@pytest.fixture
def rpc() -> RpcStub:
    return RpcStub()


@pytest.fixture
def agent(rpc, config) -> PharosAgentKit:
    """Agent kit whose chain client talks to the RPC stub."""
    client = PharosClient(PharosChains["PHAROS_DEVNET"], transport=rpc.transport())
    wallet = LocalWalletProvider(TEST_PRIVATE_KEY, client)
    return PharosAgentKit(wallet, client, config)


@pytest.fixture
def empty_input_action() -> ActionDefinition:
    async def handler(agent, input: EmptyInput) -> dict:
        return success_result(address=agent.wallet_address)

    return ActionDefinition(
        name="WHOAMI",
        description="Get the wallet address",
        schema=EmptyInput,
        handler=handler,
    )


@pytest.fixture
def agent_factory(config):
    """Build agent kits against a given RPC stub"""

    def build(stub: RpcStub, priority_level="medium") -> PharosAgentKit:
        client = PharosClient(PharosChains["PHAROS_DEVNET"], transport=stub.transport())
        wallet = LocalWalletProvider(TEST_PRIVATE_KEY, client, priority_level=priority_level)
        return PharosAgentKit(wallet, client, config)

    return build
