"""
Reference store.

Holds the current state and drives dispatch through a reducer. Provided so
composite reducers can be exercised the way an application would.
"""

from .store import Store, create_store

__all__ = [
    "Store",
    "create_store",
]
