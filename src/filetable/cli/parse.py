from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from filetable.cli.files import render_results
from filetable.core.parser import StructuralParseError, parse_csv_outcomes
from filetable.models import FileResult

console = Console()


def parse(
    path: Annotated[Path, typer.Argument(help="Path to a local CSV file.", exists=True, dir_okay=False)],
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Also list discarded rows.")] = False,
) -> None:
    """Validate a local CSV file with the same rules as the API."""
    content = path.read_text(encoding="utf-8")
    try:
        outcomes = parse_csv_outcomes(content, path.name)
    except StructuralParseError as exc:
        console.print(f"[red]Could not parse {path}:[/red] {exc}")
        raise typer.Exit(1) from exc

    records = [o.record for o in outcomes if o.record is not None]
    if records:
        render_results([FileResult(file=path.name, lines=records)])
    else:
        console.print("[yellow]No valid lines found.[/yellow]")

    discarded = [o for o in outcomes if not o.kept]
    if verbose and discarded:
        table = Table(title="Discarded rows")
        table.add_column("line")
        table.add_column("reason")
        table.add_column("detail")
        for outcome in discarded:
            reason = outcome.reason.value if outcome.reason else ""
            table.add_row(str(outcome.line_number), reason, outcome.detail)
        console.print(table)
    console.print(f"{len(records)} kept, {len(discarded)} discarded")
