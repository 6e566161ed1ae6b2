"""Action registry."""

from __future__ import annotations

from typing import Iterable, Iterator

from .actions.base import ActionDefinition
from .types import DuplicateActionError, UnknownActionError


class ActionRegistry:
    """
    Append-only mapping of action name to ActionDefinition.

    Iteration follows registration order. Registering a name twice is an
    error; there is no removal operation.

    Example:
        >>> registry = ActionRegistry([get_wallet_address_action])
        >>> registry.get("GET_WALLET_ADDRESS").description
        'Get wallet address of the agent'
    """

    def __init__(self, actions: Iterable[ActionDefinition] = ()) -> None:
        self._actions: dict[str, ActionDefinition] = {}
        for action in actions:
            self.register(action)

    def register(self, action: ActionDefinition) -> ActionDefinition:
        """Register an action."""
        if not action.name or not action.name.strip():
            raise ValueError("Action name must not be empty")
        if action.name in self._actions:
            raise DuplicateActionError(f"Action already registered: {action.name}")
        self._actions[action.name] = action
        return action

    def get(self, name: str) -> ActionDefinition:
        """Get an action by name."""
        try:
            return self._actions[name]
        except KeyError:
            raise UnknownActionError(f"Unknown action: {name}") from None

    def find(self, name: str) -> ActionDefinition | None:
        """Get an action by name, or None if not registered."""
        return self._actions.get(name)

    def list(self) -> list[ActionDefinition]:
        """List all actions in registration order."""
        return list(self._actions.values())

    def names(self) -> list[str]:
        """List all action names in registration order."""
        return list(self._actions.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __iter__(self) -> Iterator[ActionDefinition]:
        return iter(self._actions.values())

    def __len__(self) -> int:
        return len(self._actions)
