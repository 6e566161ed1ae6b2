"""Action executor."""

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from .registry import ActionRegistry
from .types import ActionValidationError, error_result, is_result_envelope, success_result

logger = logging.getLogger(__name__)


async def execute_action(
    registry: ActionRegistry,
    name: str,
    input: Mapping[str, Any] | None,
    context: Any,
) -> dict[str, Any]:
    """
    Execute a registered action by name.

    Never raises: unknown names, invalid input and handler faults all come
    back as error envelopes.

    Args:
        registry: Registry to resolve the action from
        name: Action name
        input: Untyped action input
        context: Execution context passed to the handler

    Returns:
        Result envelope with ``status`` set to "success" or "error"
    """
    action = registry.find(name)
    if action is None:
        return error_result(f"Unknown action: {name}")

    try:
        validated = action.schema.model_validate({} if input is None else input)
    except ValidationError as e:
        return error_result(to_action_validation_error(name, e).message)

    try:
        result = await action.handler(context, validated)
    except Exception as e:
        logger.error("Action %s failed: %s", name, e, exc_info=True)
        return error_result(str(e) or e.__class__.__name__)

    return normalize_result(result)


def normalize_result(result: Any) -> dict[str, Any]:
    """Wrap a handler return value in a result envelope unless it already is one."""
    if is_result_envelope(result):
        return result
    if isinstance(result, dict):
        return success_result(**{k: v for k, v in result.items() if k != "status"})
    return success_result(result=result)


def format_validation_error(error: ValidationError) -> str:
    """List each failing field with its message."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "input"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def to_action_validation_error(name: str, error: ValidationError) -> ActionValidationError:
    """Convert a pydantic validation failure for an action's input."""
    fields = sorted({str(item["loc"][0]) for item in error.errors() if item["loc"]})
    return ActionValidationError(
        f"Invalid input for {name}: {format_validation_error(error)}",
        fields=fields,
    )
