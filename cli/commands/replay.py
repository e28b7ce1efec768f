"""
Replay command: replay a JSONL action file through a reducer
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from combinekit.core import CombineError
from combinekit.replay import read_actions
from combinekit.replay import replay as replay_actions

from ._loader import TargetError, load_reducer

console = Console()


def replay_command(
    target: str = typer.Argument(..., help="Reducer map or reducer, as MODULE:ATTR"),
    actions_path: str = typer.Option(..., "--actions", "-a", help="Path to JSONL action file"),
    until: Optional[int] = typer.Option(None, "--until", "-u", help="Stop after this many actions"),
    state: Optional[str] = typer.Option(None, "--state", "-s", help="Preloaded state as a JSON object"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay actions and report how many produced a new state.

    Examples:
        combinekit replay myapp.reducers:REDUCERS --actions actions.jsonl
        combinekit replay myapp.reducers:REDUCERS -a actions.jsonl --until 10
        combinekit replay myapp.reducers:REDUCERS -a actions.jsonl --json
    """
    try:
        reducer = load_reducer(target)
        preloaded = json.loads(state) if state else None
        result = replay_actions(reducer, read_actions(actions_path), preloaded_state=preloaded, until=until)
    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Action file not found", "path": actions_path}))
        else:
            console.print(f"[red]Error: Action file not found:[/red] {actions_path}")
        raise typer.Exit(2)
    except (TargetError, ValueError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)
    except CombineError as e:
        if json_output:
            print(json.dumps({"error": str(e), "error_type": type(e).__name__}))
        else:
            console.print(f"[red]✗ {type(e).__name__}:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    keys = list(result.state.keys()) if isinstance(result.state, dict) else []
    if json_output:
        output = {
            "success": True,
            "actions_applied": result.applied,
            "state_changes": result.changed,
            "keys": keys,
        }
        print(json.dumps(output, indent=2))
    else:
        console.print(f"[green]✓ Replayed {result.applied} actions[/green]")
        console.print(f"  State changes: [cyan]{result.changed}[/cyan]")
        table = Table(title="Final State")
        table.add_column("Slice", style="green")
        table.add_column("Value", style="cyan")
        for key in keys:
            table.add_row(key, escape(repr(result.state[key])[:60]))
        console.print(table)

    raise typer.Exit(0)
