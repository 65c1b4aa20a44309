"""Check that every combinator of `Outcome` has an `AsyncOutcome` counterpart."""

import inspect
from collections.abc import Callable
from typing import Annotated, Any, Final, NamedTuple

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

import twofold as tf

app = typer.Typer(help="Async/sync API parity checks for twofold.")

CONSOLE: Final = Console()

MIRRORED: Final = frozenset(
    {
        "map_success",
        "map_error",
        "flat_map_success",
        "swap",
        "when",
        "get_or_else",
        "get_or_else_get",
    }
)
"""Operations the async adapter must expose under the same name."""


class Operation(NamedTuple):
    """A public operation and the parameters it accepts."""

    name: str
    params: tuple[str, ...]


def _unwrap(fn: Any) -> Callable[..., Any]:
    if isinstance(fn, (staticmethod, classmethod)):
        return fn.__func__
    return fn


def _operations(dtype: type) -> dict[str, Operation]:
    ops: dict[str, Operation] = {}
    for klass in reversed(dtype.mro()):
        for name, member in vars(klass).items():
            fn = _unwrap(member)
            if name.startswith("_") or not callable(fn):
                continue
            params = tuple(
                p for p in inspect.signature(fn).parameters if p not in {"self", "cls"}
            )
            ops[name] = Operation(name, params)
    return ops


def _mismatches(
    sync_ops: dict[str, Operation], async_ops: dict[str, Operation]
) -> list[tuple[str, str]]:
    errors: list[tuple[str, str]] = []
    for name in sorted(MIRRORED):
        if name not in async_ops:
            errors.append((name, "missing from AsyncOutcome"))
        elif async_ops[name].params != sync_ops[name].params:
            errors.append(
                (
                    name,
                    f"parameters differ: {sync_ops[name].params} != {async_ops[name].params}",
                )
            )
    return errors


@app.command()
def check(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="List every operation.")
    ] = False,
) -> None:
    """Compare the operations of `Outcome` and `AsyncOutcome`."""
    sync_ops = _operations(tf.Outcome)
    async_ops = _operations(tf.AsyncOutcome)

    if verbose:
        table = Table(title="Operations", show_header=True)
        table.add_column("Operation", style="cyan")
        table.add_column("Outcome", style="magenta")
        table.add_column("AsyncOutcome", style="magenta")
        for name in sorted(sync_ops.keys() | async_ops.keys()):
            table.add_row(
                name,
                "x" if name in sync_ops else "",
                "x" if name in async_ops else "",
            )
        CONSOLE.print(table)

    errors = _mismatches(sync_ops, async_ops)
    if not errors:
        CONSOLE.print(Text("[OK] AsyncOutcome mirrors Outcome", style="green"))
        return

    table = Table(title="Issues Found", show_header=True)
    table.add_column("Operation", style="cyan")
    table.add_column("Error", style="red")
    for name, message in errors:
        table.add_row(name, message)
    CONSOLE.print(table)
    CONSOLE.print(Text(f"\n[FAILED] Found {len(errors)} issue(s)", style="red"))
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
