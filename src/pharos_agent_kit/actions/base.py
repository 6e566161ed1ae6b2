"""Action definition shared by every protocol adapter."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from pydantic import BaseModel, ConfigDict

from ..types import ActionExample

if TYPE_CHECKING:
    from ..agent import PharosAgentKit


Handler = Callable[["PharosAgentKit", Any], Awaitable[dict[str, Any]]]


class EmptyInput(BaseModel):
    """Input schema for actions that take no parameters."""

    model_config = ConfigDict(extra="ignore")


@dataclass(frozen=True)
class ActionDefinition:
    """
    A named, schema-validated operation.

    The handler receives the execution context and the validated input
    model, and returns a result envelope.

    Example:
        >>> ping = ActionDefinition(
        ...     name="PING",
        ...     description="Check that the agent is alive",
        ...     schema=EmptyInput,
        ...     handler=ping_handler,
        ... )
    """

    name: str
    description: str
    schema: type[BaseModel]
    handler: Handler
    similes: tuple[str, ...] = ()
    examples: tuple[tuple[ActionExample, ...], ...] = field(default_factory=tuple)

    def flat_examples(self) -> list[ActionExample]:
        """Get all examples in declaration order."""
        return [example for group in self.examples for example in group]

    def has_examples(self) -> bool:
        return any(self.examples)
