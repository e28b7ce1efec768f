"""
Store: holds current state, dispatches actions through one reducer.

Dispatch is synchronous and serialized. A reducer may not dispatch.
"""

from typing import Any, Callable, List, Optional

from ..core.actions import ActionTypes, is_action
from ..core.errors import DispatchInProgressError, InvalidActionError, StoreError

Listener = Callable[[], None]


class Store:
    """
    Single-reducer state container.

    Usage:
        store = create_store(combine_reducers({"counter": counter}))
        store.dispatch({"type": "increment"})
        store.get_state()  # {"counter": 1}
    """

    def __init__(self, reducer: Callable[[Any, Any], Any], preloaded_state: Any = None) -> None:
        if not callable(reducer):
            raise StoreError(f"Expected the reducer to be callable, got {type(reducer).__name__}")
        self._reducer = reducer
        self._state = preloaded_state
        self._listeners: List[Listener] = []
        self._dispatching = False
        self.dispatch({"type": ActionTypes.INIT})

    def get_state(self) -> Any:
        """Return the current state."""
        if self._dispatching:
            raise DispatchInProgressError("get_state() may not be called while the reducer is executing")
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called after each dispatch that changed the state.

        Returns:
            Function removing the listener (safe to call twice)
        """
        if not callable(listener):
            raise StoreError("Expected the listener to be callable")
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Any) -> Any:
        """
        Run the reducer on the current state.

        The state is replaced, and listeners notified, only when the reducer
        returned a different object.

        Returns:
            The dispatched action

        Raises:
            InvalidActionError: If action is not a mapping with a "type"
            DispatchInProgressError: If called from inside a reducer
        """
        if not is_action(action):
            raise InvalidActionError(
                f'Actions must be mappings with a "type" key, got {action!r}'
            )
        if self._dispatching:
            raise DispatchInProgressError("Reducers may not dispatch actions")

        self._dispatching = True
        try:
            next_state = self._reducer(self._state, action)
        finally:
            self._dispatching = False

        if next_state is not self._state:
            self._state = next_state
            for listener in list(self._listeners):
                listener()
        return action

    def replace_reducer(self, next_reducer: Callable[[Any, Any], Any]) -> None:
        """
        Swap the reducer and let it establish its own state shape.

        Dispatches the reserved REPLACE action right away.
        """
        if not callable(next_reducer):
            raise StoreError(f"Expected the next reducer to be callable, got {type(next_reducer).__name__}")
        self._reducer = next_reducer
        self.dispatch({"type": ActionTypes.REPLACE})


def create_store(reducer: Callable[[Any, Any], Any], preloaded_state: Optional[Any] = None) -> Store:
    """
    Create a store and compute its initial state.

    Args:
        reducer: Reducer (typically from combine_reducers)
        preloaded_state: Initial state handed to the reducer with INIT

    Returns:
        Store
    """
    return Store(reducer, preloaded_state)
