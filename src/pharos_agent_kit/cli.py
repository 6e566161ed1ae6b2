"""Command line entry point for Pharos Agent Kit."""

import argparse
import asyncio
import json
import logging
import os
import sys

from dotenv import load_dotenv

from .actions import create_action_registry
from .agent import PharosAgentKit
from .config import AgentConfig
from .executor import execute_action
from .mcp import start_mcp_server
from .mcp.server import DEFAULT_SERVER_NAME, DEFAULT_SERVER_VERSION
from .types import ErrorCode, PharosAgentError

logger = logging.getLogger(__name__)


def build_agent() -> PharosAgentKit:
    """Build the agent kit from environment variables."""
    private_key = os.environ.get("PHAROS_PRIVATE_KEY")
    if not private_key:
        raise PharosAgentError("PHAROS_PRIVATE_KEY is not set", ErrorCode.INVALID_CONFIG)

    try:
        config = AgentConfig.from_env()
    except ValueError as e:
        raise PharosAgentError(str(e), ErrorCode.INVALID_CONFIG, cause=e) from e

    return PharosAgentKit.from_private_key(
        private_key,
        rpc_url=os.environ.get("RPC_URL") or None,
        config=config,
    )


def cmd_mcp(args: argparse.Namespace) -> int:
    agent = build_agent()
    asyncio.run(start_mcp_server(agent, name=args.name, version=args.server_version))
    return 0


def cmd_actions(args: argparse.Namespace) -> int:
    for action in create_action_registry():
        print(f"{action.name}: {action.description}")
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    try:
        action_input = json.loads(args.input)
    except json.JSONDecodeError as e:
        print(f"Invalid --input JSON: {e}", file=sys.stderr)
        return 2
    if not isinstance(action_input, dict):
        print("--input must be a JSON object", file=sys.stderr)
        return 2

    agent = build_agent()
    result = asyncio.run(execute_action(create_action_registry(), args.name, action_input, agent))
    print(json.dumps(result, indent=2, default=str))
    return 0 if result["status"] == "success" else 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pharos-agent-kit", add_help=True)
    p.add_argument("--log-level", default=os.environ.get("LOG_LEVEL", "INFO"))
    sub = p.add_subparsers(dest="command")

    mcp = sub.add_parser("mcp", help="Serve all actions over MCP stdio")
    mcp.add_argument("--name", default=DEFAULT_SERVER_NAME)
    mcp.add_argument("--server-version", default=DEFAULT_SERVER_VERSION)
    mcp.set_defaults(func=cmd_mcp)

    actions = sub.add_parser("actions", help="List registered actions")
    actions.set_defaults(func=cmd_actions)

    run = sub.add_parser("run", help="Execute one action and print the result")
    run.add_argument("name")
    run.add_argument("--input", default="{}", help="Action input as a JSON object")
    run.set_defaults(func=cmd_run)

    return p


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    # stdout carries the MCP transport
    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return 2

    try:
        return int(args.func(args))
    except PharosAgentError as e:
        logger.error("%s", e.message)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
