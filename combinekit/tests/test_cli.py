"""
Tests for the combinekit CLI.
"""

import json

import pytest
from typer.testing import CliRunner

import cli.main
from cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    # Keep the root logger untouched between tests.
    monkeypatch.setattr(cli.main, "setup_logging", lambda: None)


def test_check_reports_initial_slices():
    result = runner.invoke(app, ["check", "combinekit.tests.reducer_fixtures:REDUCERS", "--json"])

    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert output["success"] is True
    assert output["keys"] == ["counter", "stack"]
    assert output["slice_types"] == {"counter": "int", "stack": "list"}


def test_check_rich_output():
    result = runner.invoke(app, ["check", "combinekit.tests.reducer_fixtures:REDUCERS"])

    assert result.exit_code == 0
    assert "initialized 2 slice(s)" in result.stdout


def test_check_shape_error_exits_1():
    result = runner.invoke(app, ["check", "combinekit.tests.reducer_fixtures:BROKEN", "--json"])

    assert result.exit_code == 1
    output = json.loads(result.stdout)
    assert output["success"] is False
    assert output["error_type"] == "ShapeAssertionError"
    assert "initialization" in output["error"]


@pytest.mark.parametrize(
    "target",
    [
        "combinekit.tests.reducer_fixtures",
        "combinekit.tests.no_such_module:REDUCERS",
        "combinekit.tests.reducer_fixtures:MISSING",
        "combinekit.tests.reducer_fixtures:NOT_REDUCERS",
    ],
)
def test_check_load_errors_exit_2(target):
    result = runner.invoke(app, ["check", target, "--json"])

    assert result.exit_code == 2
    assert json.loads(result.stdout)["success"] is False


def test_check_with_preloaded_state():
    result = runner.invoke(
        app,
        ["check", "combinekit.tests.reducer_fixtures:REDUCERS", "--state", '{"counter": 3}', "--json"],
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout)["keys"] == ["counter", "stack"]


def test_replay_command(tmp_path):
    path = tmp_path / "actions.jsonl"
    path.write_text(
        "\n".join(
            json.dumps(a)
            for a in [{"type": "increment"}, {"type": "noop"}, {"type": "push", "value": "a"}]
        )
    )

    result = runner.invoke(
        app,
        ["replay", "combinekit.tests.reducer_fixtures:REDUCERS", "--actions", str(path), "--json"],
    )

    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert output["actions_applied"] == 3
    assert output["state_changes"] == 2
    assert output["keys"] == ["counter", "stack"]


def test_replay_until(tmp_path):
    path = tmp_path / "actions.jsonl"
    path.write_text("\n".join(json.dumps({"type": "increment"}) for _ in range(5)))

    result = runner.invoke(
        app,
        ["replay", "combinekit.tests.reducer_fixtures:REDUCERS", "-a", str(path), "-u", "2", "--json"],
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout)["actions_applied"] == 2


def test_replay_missing_file(tmp_path):
    result = runner.invoke(
        app,
        ["replay", "combinekit.tests.reducer_fixtures:REDUCERS", "-a", str(tmp_path / "nope.jsonl"), "--json"],
    )

    assert result.exit_code == 2
    assert json.loads(result.stdout)["error"] == "Action file not found"


def test_replay_invalid_action_exits_1(tmp_path):
    path = tmp_path / "actions.jsonl"
    path.write_text('{"payload": 1}\n')

    result = runner.invoke(
        app,
        ["replay", "combinekit.tests.reducer_fixtures:REDUCERS", "-a", str(path), "--json"],
    )

    assert result.exit_code == 1
    assert json.loads(result.stdout)["error_type"] == "InvalidActionError"


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "combinekit CLI" in result.stdout
