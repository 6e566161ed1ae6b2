"""Core type definitions for Pharos Agent Kit."""

import re
from enum import IntEnum
from typing import Any
from dataclasses import dataclass, field


# Regular expression for validating EVM addresses
EVM_ADDRESS_REGEX = re.compile(r"^0x[a-fA-F0-9]{40}$")


class ErrorCode(IntEnum):
    """Error codes for toolkit operations."""

    INVALID_CONFIG = 1
    DUPLICATE_ACTION = 2
    UNKNOWN_ACTION = 3
    VALIDATION_FAILED = 4
    HANDLER_FAILED = 5
    SCHEMA_TRANSLATION = 6
    TRANSPORT_FAILED = 7
    CHAIN_ERROR = 8
    NETWORK_ERROR = 9
    UNKNOWN = 99


class PharosAgentError(Exception):
    """Base exception for Pharos Agent Kit."""

    code = ErrorCode.UNKNOWN

    def __init__(self, message: str, code: ErrorCode | None = None, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.cause = cause


class DuplicateActionError(PharosAgentError):
    """An action with the same name is already registered."""

    code = ErrorCode.DUPLICATE_ACTION


class UnknownActionError(PharosAgentError):
    """The requested action name is not registered."""

    code = ErrorCode.UNKNOWN_ACTION


class ActionValidationError(PharosAgentError):
    """Action input failed schema validation."""

    code = ErrorCode.VALIDATION_FAILED

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class HandlerError(PharosAgentError):
    """An action handler faulted."""

    code = ErrorCode.HANDLER_FAILED


class SchemaTranslationError(PharosAgentError):
    """An action schema cannot be translated for a protocol adapter."""

    code = ErrorCode.SCHEMA_TRANSLATION

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class UnsupportedSchemaTypeError(SchemaTranslationError):
    """A schema node uses a field kind outside the supported set."""


class SchemaCycleError(SchemaTranslationError):
    """A schema references itself recursively."""


class TransportError(PharosAgentError):
    """A protocol adapter failed to attach its transport."""

    code = ErrorCode.TRANSPORT_FAILED


class ChainError(PharosAgentError):
    """A JSON-RPC call against the chain failed."""

    code = ErrorCode.CHAIN_ERROR


@dataclass(frozen=True)
class ActionExample:
    """Example of an action with input and output."""

    input: dict[str, Any]
    output: dict[str, Any]
    explanation: str


def success_result(**payload: Any) -> dict[str, Any]:
    """Build a success result envelope."""
    return {"status": "success", **payload}


def error_result(message: str) -> dict[str, Any]:
    """Build an error result envelope."""
    return {"status": "error", "message": message}


def is_result_envelope(value: Any) -> bool:
    """Check whether a value already carries a result status."""
    return isinstance(value, dict) and value.get("status") in ("success", "error")


@dataclass
class Balance:
    """Balance information."""

    raw: int  # Raw balance in smallest unit
    formatted: str  # Human-readable balance with decimals
    symbol: str  # Currency/token symbol
    decimals: int  # Number of decimals

    def is_zero(self) -> bool:
        """Check if balance is zero."""
        return self.raw == 0


@dataclass
class TxHash:
    """Transaction hash result."""

    hash: str  # Transaction hash
    explorer_url: str | None = None  # Explorer URL (if available)


@dataclass
class TxReceipt:
    """Transaction receipt."""

    tx_hash: str
    block_number: int
    status: str  # "success" or "reverted"
    gas_used: int | None = None
    effective_gas_price: int | None = None
    logs: list[dict[str, Any]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == "success"
