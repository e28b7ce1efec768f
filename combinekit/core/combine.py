"""
Reducer composition.

combine_reducers() turns a mapping of slice reducers into one reducer that
manages an aggregate state mapping keyed by the same names.

Guarantees:
- The result has exactly the keys of the retained reducers
- The input state is never mutated
- When no slice changed (by identity) and the key count is stable, the
  input state object itself is returned
"""

import secrets
from types import MappingProxyType, TracebackType
from typing import Any, Callable, Dict, Mapping, Optional, Set, Tuple

from ..config import ComposerOptions
from ..logging_config import diagnostic_reporter
from .actions import ActionTypes, action_type, describe_action_type
from .assertion import assert_reducer_shape
from .errors import ReducerUndefinedResultError
from .sanitize import Reducer, sanitize_reducers
from .shape import unexpected_state_shape_message


def _undefined_result_message(key: str, action: Any) -> str:
    kind = action_type(action)
    if kind is None:
        return (
            f'The slice reducer for key "{key}" returned None, and it was not given '
            f'an action. Reducers expect an action: a mapping with a "type" key. '
            f"To ignore an action, you must explicitly return the previous state."
        )
    return (
        f'When called with an action of type "{describe_action_type(kind)}", the slice '
        f'reducer for key "{key}" returned None. To ignore an action, you must '
        f"explicitly return the previous state. If you want this reducer to hold "
        f"no value, return a placeholder such as 0 or an empty collection."
    )


class CombinedReducer:
    """
    Composite reducer over named slice reducers.

    Usage:
        reducer = CombinedReducer({"counter": counter, "todos": todos})
        state = reducer(None, {"type": "increment"})

    Construction sanitizes the map and probes every reducer. A probe failure
    is kept and raised on every call instead of at construction.
    """

    def __init__(self, reducers: Mapping[str, Any], options: Optional[ComposerOptions] = None) -> None:
        self._options = options or ComposerOptions()
        self.composer_id = secrets.token_hex(4)

        report: Optional[Callable[[str], None]] = None
        if self._options.diagnostics:
            report = self._options.report or diagnostic_reporter(self.composer_id)
        self._report = report

        self._reducers: Dict[str, Reducer] = sanitize_reducers(reducers, report=report)
        self._unexpected_key_cache: Set[str] = set()

        self._shape_error: Optional[BaseException] = None
        self._shape_traceback: Optional[TracebackType] = None
        try:
            assert_reducer_shape(self._reducers, ActionTypes.probe_unknown_action())
        except Exception as exc:
            self._shape_error = exc
            self._shape_traceback = exc.__traceback__

    @property
    def keys(self) -> Tuple[str, ...]:
        """Slice keys managed by this reducer, in iteration order."""
        return tuple(self._reducers)

    @property
    def reducers(self) -> Mapping[str, Reducer]:
        """Read-only view of the retained slice reducers."""
        return MappingProxyType(self._reducers)

    @property
    def shape_error(self) -> Optional[BaseException]:
        """The deferred construction failure, if any."""
        return self._shape_error

    def __call__(self, state: Any = None, action: Any = None) -> Any:
        """
        Apply every slice reducer to its slice.

        Args:
            state: Previous aggregate state (None means empty)
            action: Action being dispatched

        Returns:
            A new dict if anything changed, otherwise `state` itself

        Raises:
            ShapeAssertionError: If a reducer failed its construction probe
            ReducerUndefinedResultError: If a slice reducer returns None
        """
        if self._shape_error is not None:
            # Restore the probe traceback so repeated raises do not grow it.
            raise self._shape_error.with_traceback(self._shape_traceback)

        if state is None:
            state = {}

        if self._report is not None:
            message = unexpected_state_shape_message(
                state, self._reducers, action, self._unexpected_key_cache
            )
            if message:
                self._report(message)

        # The warner has already reported non-mapping states; slices read as missing.
        previous_slices = state if isinstance(state, Mapping) else {}

        changed = False
        next_state: Dict[str, Any] = {}
        for key, reducer in self._reducers.items():
            previous = previous_slices.get(key)
            next_slice = reducer(previous, action)
            if next_slice is None:
                raise ReducerUndefinedResultError(
                    _undefined_result_message(key, action),
                    key=key,
                    action_type=action_type(action),
                )
            next_state[key] = next_slice
            changed = changed or next_slice is not previous

        # Count only: a swap that adds one key and drops another is caught by
        # the new slice's identity, not here.
        changed = changed or len(self._reducers) != len(previous_slices)
        return next_state if changed else state

    def __repr__(self) -> str:
        return f"CombinedReducer(keys={list(self._reducers)!r})"


def combine_reducers(reducers: Mapping[str, Any], options: Optional[ComposerOptions] = None) -> CombinedReducer:
    """
    Build a composite reducer from a mapping of slice reducers.

    Args:
        reducers: Mapping of slice key -> reducer. None values are reported,
            other non-callables are ignored.
        options: Composer options (diagnostics on by default)

    Returns:
        CombinedReducer, callable as reducer(state, action)
    """
    return CombinedReducer(reducers, options=options)
