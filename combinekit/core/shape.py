"""
Runtime state shape warnings.

Compares the keys of an incoming aggregate state against the composer's
reducer keys. Never raises: the result is a message (or None) for the
diagnostic channel.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Set

from .actions import ActionTypes, action_type

PRELOADED_STATE_SOURCE = "preloaded state argument passed to create_store"
PREVIOUS_STATE_SOURCE = "previous state received by the reducer"


def _quoted(keys: Iterable[str]) -> str:
    return ", ".join(f'"{key}"' for key in keys)


def unexpected_state_shape_message(
    state: Any,
    reducers: Mapping,
    action: Any,
    unexpected_key_cache: Set[str],
) -> Optional[str]:
    """
    Build the shape mismatch message for one invocation, if any.

    Unexpected keys are recorded in `unexpected_key_cache` and never
    reported again for the same cache, even after a REPLACE action.

    Args:
        state: Incoming aggregate state
        reducers: Sanitized reducer mapping
        action: Action being dispatched (may be malformed)
        unexpected_key_cache: Per-composer set of already reported keys

    Returns:
        Message string, or None when the shape is fine
    """
    reducer_keys = list(reducers.keys())
    kind = action_type(action)
    if kind == ActionTypes.INIT:
        argument_source = PRELOADED_STATE_SOURCE
    else:
        argument_source = PREVIOUS_STATE_SOURCE

    if not reducer_keys:
        return (
            "Store does not have a valid reducer. Make sure the argument passed "
            "to combine_reducers has a value under every key."
        )

    if not isinstance(state, Mapping):
        return (
            f'The {argument_source} has unexpected type of "{type(state).__name__}". '
            f"Expected argument to be a mapping with the following keys: {_quoted(reducer_keys)}"
        )

    unexpected_keys = [
        key for key in state.keys()
        if key not in reducers and key not in unexpected_key_cache
    ]
    unexpected_key_cache.update(unexpected_keys)

    # A reducer swap legitimately changes the expected keys.
    if kind == ActionTypes.REPLACE:
        return None

    if unexpected_keys:
        noun = "keys" if len(unexpected_keys) > 1 else "key"
        return (
            f"Unexpected {noun} {_quoted(unexpected_keys)} found in {argument_source}. "
            f"Expected to find one of the known reducer keys instead: "
            f"{_quoted(reducer_keys)}. Unexpected keys will be ignored."
        )

    return None
