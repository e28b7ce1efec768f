"""
Exception types for the reducer composer and its reference store.
"""

from typing import Any, Optional


class CombineError(Exception):
    """Base class for all combinekit errors."""
    pass


class ShapeAssertionError(CombineError):
    """
    Raised when a reducer returns None while probed at construction.

    Stored by the composer and raised on first invocation.
    """

    def __init__(self, message: str, *, key: str, phase: str) -> None:
        self.key = key
        self.phase = phase
        super().__init__(message)


class ReducerUndefinedResultError(CombineError):
    """Raised when a slice reducer returns None while handling a dispatch."""

    def __init__(self, message: str, *, key: str, action_type: Optional[Any] = None) -> None:
        self.key = key
        self.action_type = action_type
        super().__init__(message)


class StoreError(CombineError):
    """Raised when the reference store is used incorrectly."""
    pass


class InvalidActionError(StoreError):
    """Raised when dispatch receives something that is not an action."""
    pass


class DispatchInProgressError(StoreError):
    """Raised when a reducer dispatches while the store is dispatching."""
    pass
