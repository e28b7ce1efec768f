"""
Construction-time reducer shape assertion.

Each reducer is probed twice with a None state: once with the reserved INIT
action and once with a random action type nobody can handle explicitly.
Both probes must yield a non-None initial state.
"""

from typing import Any, Callable, Mapping

from .actions import ActionTypes
from .errors import ShapeAssertionError


def _initialization_message(key: str) -> str:
    return (
        f'The slice reducer for key "{key}" returned None during initialization. '
        f"If the state passed to the reducer is None, you must explicitly return "
        f"the initial state. The initial state may not be None. A default argument "
        f"is not enough, because the composer passes None positionally: check for "
        f"None and substitute the default instead. If you don't want to set a value "
        f"for this reducer, use a placeholder such as 0 or an empty collection."
    )


def _probe_message(key: str) -> str:
    return (
        f'The slice reducer for key "{key}" returned None when probed with a random type. '
        f"Don't try to handle '{ActionTypes.INIT}' or other actions in the "
        f'"@@combinekit/*" namespace. They are considered private. Instead, you must '
        f"return the current state for any unknown actions, unless it is None, in "
        f"which case you must return the initial state, regardless of the action type. "
        f"The initial state may not be None."
    )


def assert_reducer_shape(reducers: Mapping[str, Callable[[Any, Any], Any]], probe_type: str) -> None:
    """
    Probe every reducer with synthetic actions.

    Args:
        reducers: Sanitized mapping of slice key -> reducer
        probe_type: Unguessable action type for the unknown-action probe

    Raises:
        ShapeAssertionError: On the first reducer that returns None
        Exception: Anything a reducer raises while probed, unmodified
    """
    for key, reducer in reducers.items():
        initial_state = reducer(None, {"type": ActionTypes.INIT})
        if initial_state is None:
            raise ShapeAssertionError(_initialization_message(key), key=key, phase="initialization")

        if reducer(None, {"type": probe_type}) is None:
            raise ShapeAssertionError(_probe_message(key), key=key, phase="probe")
