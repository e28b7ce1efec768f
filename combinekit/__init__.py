"""
combinekit

Compose named slice reducers into one reducer over an aggregate state, with
construction-time shape assertions and runtime shape warnings.
"""

from .config import ComposerOptions
from .core import (
    ActionTypes,
    CombinedReducer,
    CombineError,
    ReducerUndefinedResultError,
    ShapeAssertionError,
    combine_reducers,
)
from .store import Store, create_store

__version__ = "0.1.0"

__all__ = [
    "ActionTypes",
    "CombinedReducer",
    "CombineError",
    "ComposerOptions",
    "ReducerUndefinedResultError",
    "ShapeAssertionError",
    "Store",
    "combine_reducers",
    "create_store",
]
