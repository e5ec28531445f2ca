"""Entry point for the lazyseq CLI."""

import math
from typing import Annotated, Any, Final

import typer
from rich.console import Console
from rich.table import Table

from ._adapters import range as lazy_range
from ._pipeline import Pipeline, make_pipeline
from ._registry import apply_op, parse_keyed, parse_number

CONSOLE: Final = Console()
DEMO_SOURCE: Final = [1, 2, 3, 2, 5, 5]

app = typer.Typer(help="Run lazy sequence pipelines from the command line.")


def _square(x: int) -> int:
    return x * x


def _is_even(x: int) -> bool:
    return x % 2 == 0


@app.command("range")
def range_(
    max_: Annotated[int, typer.Argument(metavar="MAX", help="Upper bound.")],
    *,
    inclusive: Annotated[
        bool, typer.Option("--inclusive", "-i", help="Include MAX itself.")
    ] = False,
) -> None:
    """Print the integers from 0 up to MAX."""
    CONSOLE.print(list(lazy_range(max_, inclusive)))


@app.command()
def pipe(
    values: Annotated[list[str], typer.Argument(help="Source values.")],
    *,
    ops: Annotated[
        list[str] | None,
        typer.Option(
            "--op",
            "-o",
            help="Operation to add, in order: 'unique', 'map:NAME' or 'filter:NAME'.",
        ),
    ] = None,
    keyed: Annotated[
        bool,
        typer.Option("--keyed", "-k", help="Read VALUES as key=value pairs."),
    ] = False,
) -> None:
    """Build a pipeline over VALUES and print its output."""
    source: list[Any] | dict[str, Any]
    if keyed:
        source = dict(parse_keyed(raw) for raw in values)
    else:
        source = [parse_number(raw) for raw in values]
    pipeline: Pipeline[Any] = make_pipeline(source)
    for spec in ops or []:
        pipeline = apply_op(pipeline, spec)
    try:
        output = pipeline.into(list)
    except (ValueError, ArithmeticError) as e:
        CONSOLE.print(f"✗ {e}", style="bold red", markup=False)
        raise typer.Exit(1) from e
    CONSOLE.print(output)


@app.command()
def demo() -> None:
    """Show the reference chains over a small sample."""
    table = Table(title=f"source: {DEMO_SOURCE}")
    table.add_column("chain", style="cyan")
    table.add_column("output", style="green")
    chains = {
        "map(square)": lambda p: p.map(_square),
        "map(square).unique()": lambda p: p.map(_square).unique(),
        "map(square).filter(is_even)": lambda p: p.map(_square).filter(_is_even),
        "map(square).filter(is_even).map(sqrt)": lambda p: (
            p.map(_square).filter(_is_even).map(math.sqrt)
        ),
    }
    for name, build in chains.items():
        output = make_pipeline(DEMO_SOURCE).into(build).into(list)
        table.add_row(name, str(output))
    CONSOLE.print(table)


if __name__ == "__main__":
    app()
