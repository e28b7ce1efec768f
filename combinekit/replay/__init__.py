"""
Replay an action sequence through a reducer.

Same reducer + same actions -> same final state.
"""

from .runner import ReplayResult, read_actions, replay

__all__ = [
    "ReplayResult",
    "read_actions",
    "replay",
]
