"""
Pharos Agent Kit

Wallet operations on the Pharos network and market-data lookups exposed as
named, schema-validated actions, consumable through a generic executor, as
LangChain tools or over MCP.

Example:
    >>> from pharos_agent_kit import PharosAgentKit, create_action_registry, execute_action
    >>>
    >>> agent = PharosAgentKit.from_private_key("0x...")
    >>> registry = create_action_registry()
    >>>
    >>> await execute_action(registry, "PHAROS_ERC20_BALANCE", {}, agent)
    {'status': 'success', 'balance': '1.5', 'token': 'ETH'}
"""

from .actions import ACTIONS, ActionDefinition, EmptyInput, create_action_registry
from .agent import PharosAgentKit
from .chains import PharosChainConfig, PharosChains, PharosClient
from .config import AgentConfig, PriorityLevel
from .executor import execute_action
from .registry import ActionRegistry
from .schema import FieldKind, FieldShape, SchemaShape, shape_to_json_schema, translate_schema
from .types import (
    ActionExample,
    ActionValidationError,
    ChainError,
    DuplicateActionError,
    ErrorCode,
    HandlerError,
    PharosAgentError,
    SchemaCycleError,
    SchemaTranslationError,
    TransportError,
    UnknownActionError,
    UnsupportedSchemaTypeError,
    error_result,
    success_result,
)
from .wallet import LocalWalletProvider, WalletProvider

__version__ = "0.1.0"
__all__ = [
    # Agent
    "PharosAgentKit",
    "AgentConfig",
    "PriorityLevel",
    # Actions
    "ACTIONS",
    "ActionDefinition",
    "ActionExample",
    "ActionRegistry",
    "EmptyInput",
    "create_action_registry",
    "execute_action",
    # Schema
    "FieldKind",
    "FieldShape",
    "SchemaShape",
    "translate_schema",
    "shape_to_json_schema",
    # Chain & wallet
    "PharosChainConfig",
    "PharosChains",
    "PharosClient",
    "WalletProvider",
    "LocalWalletProvider",
    # Results
    "success_result",
    "error_result",
    # Errors
    "ErrorCode",
    "PharosAgentError",
    "DuplicateActionError",
    "UnknownActionError",
    "ActionValidationError",
    "HandlerError",
    "SchemaTranslationError",
    "UnsupportedSchemaTypeError",
    "SchemaCycleError",
    "TransportError",
    "ChainError",
]
