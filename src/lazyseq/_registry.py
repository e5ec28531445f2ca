"""Named functions available to the command line, and parsing of operation specs."""

import math
from collections.abc import Callable
from typing import Any, Final

import typer

from ._pipeline import Pipeline

type Number = int | float

MAPPERS: Final[dict[str, Callable[[Number], Number]]] = {
    "square": lambda x: x * x,
    "sqrt": math.sqrt,
    "double": lambda x: x * 2,
    "negate": lambda x: -x,
    "abs": abs,
}
PREDICATES: Final[dict[str, Callable[[Number], bool]]] = {
    "even": lambda x: x % 2 == 0,
    "odd": lambda x: x % 2 == 1,
    "positive": lambda x: x > 0,
}


def _lookup[F](table: dict[str, F], name: str, kind: str) -> F:
    try:
        return table[name]
    except KeyError:
        msg = f"unknown {kind} function {name!r}, expected one of: {', '.join(table)}"
        raise typer.BadParameter(msg) from None


def parse_number(raw: str) -> Number:
    """Parse a command line value as an `int`, falling back to `float`."""
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        msg = f"{raw!r} is not a number"
        raise typer.BadParameter(msg) from None


def parse_keyed(raw: str) -> tuple[str, Number]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        msg = f"{raw!r} is not a key=value pair"
        raise typer.BadParameter(msg)
    return key, parse_number(value)


def apply_op(pipeline: Pipeline[Any], spec: str) -> Pipeline[Any]:
    """Register the operation described by **spec** on **pipeline**.

    **spec** is `unique`, `map:NAME` or `filter:NAME`.
    """
    kind, _, name = spec.partition(":")
    match kind:
        case "unique" if not name:
            return pipeline.unique()
        case "map":
            return pipeline.map(_lookup(MAPPERS, name, "map"))
        case "filter":
            return pipeline.filter(_lookup(PREDICATES, name, "filter"))
        case _:
            msg = f"invalid operation {spec!r}, expected 'unique', 'map:NAME' or 'filter:NAME'"
            raise typer.BadParameter(msg)
