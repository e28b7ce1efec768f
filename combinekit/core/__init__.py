"""
Core composition primitives.

This module provides the reducer composer and its building blocks:
- combine_reducers / CombinedReducer: composite reducer over named slices
- sanitize_reducers: drop non-callable map entries
- assert_reducer_shape: construction-time probing of slice reducers
- unexpected_state_shape_message: runtime state shape warnings
- ActionTypes: reserved action types
"""

from .actions import ActionTypes, action_type, is_action
from .assertion import assert_reducer_shape
from .combine import CombinedReducer, combine_reducers
from .errors import (
    CombineError,
    DispatchInProgressError,
    InvalidActionError,
    ReducerUndefinedResultError,
    ShapeAssertionError,
    StoreError,
)
from .sanitize import Reducer, sanitize_reducers
from .shape import unexpected_state_shape_message

__all__ = [
    "ActionTypes",
    "action_type",
    "is_action",
    "assert_reducer_shape",
    "CombinedReducer",
    "combine_reducers",
    "CombineError",
    "DispatchInProgressError",
    "InvalidActionError",
    "ReducerUndefinedResultError",
    "ShapeAssertionError",
    "StoreError",
    "Reducer",
    "sanitize_reducers",
    "unexpected_state_shape_message",
]
