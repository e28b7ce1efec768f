"""
Check command: compose a reducer map and run the init dispatch
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from combinekit.core import CombinedReducer
from combinekit.store import create_store

from ._loader import TargetError, load_reducer

console = Console()


def check_command(
    target: str = typer.Argument(..., help="Reducer map or reducer, as MODULE:ATTR"),
    state: Optional[str] = typer.Option(None, "--state", "-s", help="Preloaded state as a JSON object"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Compose a reducer map, probe its reducers and compute the initial state.

    Exit codes: 0 ok, 1 reducer shape error, 2 load error.

    Examples:
        combinekit check myapp.reducers:REDUCERS
        combinekit check myapp.reducers:REDUCERS --state '{"counter": 3}'
        combinekit check myapp.reducers:REDUCERS --json
    """
    try:
        reducer = load_reducer(target)
        preloaded = json.loads(state) if state else None
    except (TargetError, ValueError) as e:
        if json_output:
            print(json.dumps({"success": False, "error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    try:
        store = create_store(reducer, preloaded)
    except Exception as e:
        if json_output:
            print(json.dumps({"success": False, "error": str(e), "error_type": type(e).__name__}))
        else:
            console.print(f"[red]✗ {type(e).__name__}:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    initial = store.get_state()
    if isinstance(reducer, CombinedReducer):
        keys = list(reducer.keys)
    else:
        keys = list(initial.keys()) if isinstance(initial, dict) else []

    if json_output:
        output = {
            "success": True,
            "keys": keys,
            "slice_types": {key: type(initial[key]).__name__ for key in keys},
        }
        print(json.dumps(output, indent=2))
    else:
        console.print(f"[green]✓ {target} initialized {len(keys)} slice(s)[/green]")
        table = Table(title="Initial State")
        table.add_column("Slice", style="green")
        table.add_column("Type", style="cyan")
        table.add_column("Value", style="dim")
        for key in keys:
            table.add_row(key, type(initial[key]).__name__, escape(repr(initial[key])[:60]))
        console.print(table)

    raise typer.Exit(0)
