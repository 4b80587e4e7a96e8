import asyncio
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from filetable.client.errors import FetchError
from filetable.core.aggregate import collect_files_data
from filetable.core.ports.file_source import FileSource
from filetable.models import FileResult

files_app = typer.Typer(help="Query the upstream file API.")
console = Console()


def _get_source() -> FileSource:
    from filetable.client.http import HttpFileSource
    from filetable.config import get_settings

    return HttpFileSource(get_settings())


def render_results(results: list[FileResult]) -> None:
    table = Table(show_lines=False)
    for header in ("File Name", "Text", "Number", "Hex"):
        table.add_column(header)
    rows = 0
    for result in results:
        for index, line in enumerate(result.lines):
            table.add_row(result.file if index == 0 else "", line.text, str(line.number), line.hex)
            rows += 1
    console.print(table)
    console.print(f"({rows} rows)")


@files_app.command("list")
def list_files() -> None:
    """List the files available upstream."""
    source = _get_source()

    async def _run() -> list[str]:
        try:
            return await source.list_files()
        finally:
            await source.aclose()

    try:
        names = asyncio.run(_run())
    except FetchError as exc:
        console.print(f"[red]Error fetching file list:[/red] {exc}")
        raise typer.Exit(1) from exc

    table = Table(show_lines=False)
    table.add_column("file")
    for name in names:
        table.add_row(name)
    console.print(table)
    console.print(f"({len(names)} rows)")


@files_app.command("data")
def data(
    file: Annotated[str | None, typer.Option("--file", help="Restrict to a single file name.")] = None,
) -> None:
    """Fetch, validate, and print the lines of every file."""
    source = _get_source()

    async def _run() -> list[FileResult]:
        try:
            return await collect_files_data(source, file)
        finally:
            await source.aclose()

    try:
        results = asyncio.run(_run())
    except FetchError as exc:
        console.print(f"[red]Error processing files data:[/red] {exc}")
        raise typer.Exit(1) from exc

    if not results:
        console.print("[yellow]No data available.[/yellow]")
        return
    render_results(results)
