"""
Reserved action types and action inspection helpers.

Actions are mappings carrying a "type" discriminant. The types defined here
are owned by the library: application reducers must never special-case them.
"""

import secrets
from collections.abc import Mapping
from typing import Any, Optional

_NAMESPACE = "@@combinekit"


def _random_suffix() -> str:
    return secrets.token_hex(4)


class ActionTypes:
    """
    Private action types.

    INIT is dispatched by the store to compute the initial state.
    REPLACE is dispatched right after a reducer swap.

    Both carry a random suffix chosen at import time, so no application
    action can match them by accident.
    """
    INIT = f"{_NAMESPACE}/INIT.{_random_suffix()}"
    REPLACE = f"{_NAMESPACE}/REPLACE.{_random_suffix()}"

    @staticmethod
    def probe_unknown_action() -> str:
        """
        Generate a fresh, unguessable action type.

        Used once per composer to exercise each reducer's default branch.
        """
        return f"{_NAMESPACE}/PROBE_UNKNOWN_ACTION.{secrets.token_hex(8)}"


def action_type(action: Any) -> Optional[Any]:
    """
    Return the discriminant of an action, or None if the action is malformed.

    Mappings are read through their "type" key; other objects through a
    `type` attribute.
    """
    if action is None:
        return None
    if isinstance(action, Mapping):
        return action.get("type")
    return getattr(action, "type", None)


def is_action(action: Any) -> bool:
    """True for a mapping with a non-None "type"."""
    return isinstance(action, Mapping) and action.get("type") is not None


def describe_action_type(value: Any) -> str:
    """Human readable form of an action type (enum members by name)."""
    name = getattr(value, "name", None)
    if isinstance(name, str):
        return name
    return str(value)
