"""
Tests for action replay.
"""

import json

import pytest

from combinekit.core import InvalidActionError, combine_reducers
from combinekit.replay import read_actions, replay
from combinekit.tests.reducer_fixtures import REDUCERS


def test_replay_counts_applied_and_changed():
    actions = [
        {"type": "increment"},
        {"type": "noop"},
        {"type": "push", "value": "a"},
        {"type": "noop"},
    ]

    result = replay(combine_reducers(REDUCERS), actions)

    assert result.state == {"counter": 1, "stack": ["a"]}
    assert result.applied == 4
    assert result.changed == 2


def test_replay_is_deterministic():
    """Same actions through fresh composers give equal states."""
    actions = [{"type": "increment"}] * 10 + [{"type": "push", "value": i} for i in range(5)]

    results = [replay(combine_reducers(REDUCERS), actions).state for _ in range(10)]

    assert all(r == results[0] for r in results)
    assert results[0] == {"counter": 10, "stack": [0, 1, 2, 3, 4]}


def test_replay_until():
    actions = [{"type": "increment"} for _ in range(20)]

    result = replay(combine_reducers(REDUCERS), actions, until=5)

    assert result.applied == 5
    assert result.state["counter"] == 5


def test_replay_with_preloaded_state():
    result = replay(combine_reducers(REDUCERS), [{"type": "increment"}], preloaded_state={"counter": 41})
    assert result.state == {"counter": 42, "stack": []}


def test_replay_empty():
    reducer = combine_reducers(REDUCERS)
    result = replay(reducer, [])

    assert result.applied == 0
    assert result.changed == 0
    assert result.state == {"counter": 0, "stack": []}


def test_read_actions_skips_blank_lines(tmp_path):
    path = tmp_path / "actions.jsonl"
    path.write_text('{"type": "increment"}\n\n{"type": "push", "value": "a"}\n')

    assert list(read_actions(str(path))) == [
        {"type": "increment"},
        {"type": "push", "value": "a"},
    ]


def test_read_actions_rejects_non_objects(tmp_path):
    path = tmp_path / "actions.jsonl"
    path.write_text(json.dumps({"type": "increment"}) + "\n" + json.dumps(["push"]) + "\n")

    with pytest.raises(InvalidActionError, match=":2:"):
        list(read_actions(str(path)))
