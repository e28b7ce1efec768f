"""
Replay runner: fold actions through a reducer via a fresh store.
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

from ..core.errors import InvalidActionError
from ..store import create_store


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying actions
        applied: Number of actions dispatched
        changed: Number of dispatches that produced a new state object
    """
    state: Any
    applied: int
    changed: int


def replay(
    reducer: Callable[[Any, Any], Any],
    actions: Iterable[Any],
    preloaded_state: Optional[Any] = None,
    until: Optional[int] = None,
) -> ReplayResult:
    """
    Replay actions to reconstruct state.

    Args:
        reducer: Reducer to drive (typically from combine_reducers)
        actions: Actions in dispatch order
        preloaded_state: State handed to the reducer with INIT
        until: Stop after this many actions (None = all)

    Returns:
        ReplayResult with final state and counts
    """
    store = create_store(reducer, preloaded_state)
    applied = 0
    changed = 0

    def on_change() -> None:
        nonlocal changed
        changed += 1

    store.subscribe(on_change)
    for action in actions:
        if until is not None and applied >= until:
            break
        store.dispatch(action)
        applied += 1

    return ReplayResult(state=store.get_state(), applied=applied, changed=changed)


def read_actions(path: str) -> Iterator[Any]:
    """
    Read actions from a JSONL file, one action object per line.

    Blank lines are skipped.

    Raises:
        InvalidActionError: If a line is not a JSON object
    """
    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            action = json.loads(line)
            if not isinstance(action, dict):
                raise InvalidActionError(f"{path}:{lineno}: expected a JSON object, got {type(action).__name__}")
            yield action
