from __future__ import annotations

"""CLI entrypoint for weighted-levenshtein."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import build_cost_model, load_cost_table
from .costs import BaseCostModel, ElementCost, available_cost_models, get_cost_model
from .engine import distance
from .metrics import normalized_distance, similarity
from .utils import jsonio

app = typer.Typer(help="Weighted edit distance between token sequences.")
console = Console()
logger = logging.getLogger(__name__)


class Unit(str, Enum):
    chars = "chars"
    words = "words"


def _segment(value: Any, unit: Unit) -> List[str]:
    if isinstance(value, list):
        return [str(token) for token in value]
    text = str(value)
    if unit is Unit.words:
        return text.split()
    return list(text)


def _resolve_model(model: str, costs: Optional[Path]) -> BaseCostModel:
    if costs is not None:
        try:
            return build_cost_model(load_cost_table(costs))
        except (FileNotFoundError, ValueError) as exc:
            console.print(f"[red]Cannot load cost table[/red]: {escape(str(exc))}")
            raise typer.Exit(code=1) from exc
    if model == ElementCost.name:
        console.print(
            f"[red]Cost model '{model}' needs typed elements[/red]; "
            "use it from Python, not from the command line."
        )
        raise typer.Exit(code=1)
    try:
        return get_cost_model(model)
    except ValueError as exc:
        console.print(f"[red]Unknown cost model[/red]: {escape(model)}")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command("distance")
def distance_command(
    source: str = typer.Argument(..., help="Text to transform."),
    target: str = typer.Argument(..., help="Text to transform into."),
    unit: Unit = typer.Option(Unit.chars, "--unit", "-u", help="Compare characters or words."),
    model: str = typer.Option("uniform", "--model", "-m", help="Registered cost model name."),
    costs: Optional[Path] = typer.Option(
        None, "--costs", "-c", help="YAML cost table; overrides --model."
    ),
) -> None:
    cost_model = _resolve_model(model, costs)
    a = _segment(source, unit)
    b = _segment(target, unit)
    logger.debug("Comparing %d and %d %s with %r", len(a), len(b), unit.value, cost_model)

    table = Table(title="Edit Distance")
    table.add_column("metric")
    table.add_column("value", justify="right")
    table.add_row("distance", str(distance(a, b, cost_model)))
    table.add_row("normalized", f"{normalized_distance(a, b, cost_model):.3f}")
    table.add_row("similarity", f"{similarity(a, b, cost_model):.3f}")
    console.print(table)


@app.command()
def batch(
    pairs: Path = typer.Argument(..., help="JSONL file with one {\"a\": ..., \"b\": ...} per line."),
    unit: Unit = typer.Option(Unit.chars, "--unit", "-u", help="Compare characters or words."),
    model: str = typer.Option("uniform", "--model", "-m", help="Registered cost model name."),
    costs: Optional[Path] = typer.Option(
        None, "--costs", "-c", help="YAML cost table; overrides --model."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write results as JSONL to this path."
    ),
) -> None:
    if not pairs.exists():
        console.print(f"[red]Pairs file not found:[/red] {pairs}")
        raise typer.Exit(code=1)
    cost_model = _resolve_model(model, costs)

    results: List[Dict[str, Any]] = []
    try:
        for line_no, row in enumerate(jsonio.iter_jsonl(pairs), start=1):
            if not isinstance(row, dict) or "a" not in row or "b" not in row:
                console.print(f"[red]Row {line_no} needs 'a' and 'b' fields[/red]")
                raise typer.Exit(code=1)
            a = _segment(row["a"], unit)
            b = _segment(row["b"], unit)
            results.append(
                {
                    **row,
                    "distance": distance(a, b, cost_model),
                    "normalized_distance": normalized_distance(a, b, cost_model),
                }
            )
    except json.JSONDecodeError as exc:
        console.print(f"[red]Malformed JSON in {escape(str(pairs))}[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    logger.debug("Scored %d pairs from %s", len(results), pairs)

    table = Table(title="Batch Distances")
    table.add_column("#", justify="right")
    table.add_column("a")
    table.add_column("b")
    table.add_column("distance", justify="right")
    table.add_column("normalized", justify="right")
    for index, record in enumerate(results, start=1):
        table.add_row(
            str(index),
            str(record["a"]),
            str(record["b"]),
            str(record["distance"]),
            f"{record['normalized_distance']:.3f}",
        )
    console.print(table)

    if output is not None:
        jsonio.write_jsonl(output, results)
        console.print(f"Results written to [green]{output}[/green]")


@app.command()
def models() -> None:
    table = Table(title="Cost Models")
    table.add_column("name")
    table.add_column("class")
    table.add_column("uniform", justify="right")
    for name, model_cls in sorted(available_cost_models().items()):
        table.add_row(name, model_cls.__name__, str(int(model_cls.uniform)))
    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
