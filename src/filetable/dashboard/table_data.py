"""Turn aggregated file results into DataTable rows and apply the text search."""

from __future__ import annotations

from typing import Any

COLUMNS: list[dict[str, str]] = [
    {"name": "File Name", "id": "file"},
    {"name": "Text", "id": "text"},
    {"name": "Number", "id": "number"},
    {"name": "Hex", "id": "hex"},
]


def _line_matches(line: dict[str, Any], needle: str) -> bool:
    return any(needle in str(value).lower() for value in line.values())


def filter_results(results: list[dict[str, Any]], term: str | None) -> list[dict[str, Any]]:
    """Keep lines where any field contains ``term`` (case-insensitive); drop emptied files."""
    if not term:
        return results
    needle = term.lower()
    filtered: list[dict[str, Any]] = []
    for result in results:
        lines = [line for line in result["lines"] if _line_matches(line, needle)]
        if lines:
            filtered.append({**result, "lines": lines})
    return filtered


def results_to_rows(results: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Flatten results to one row per line; the file name appears on the first row of each group."""
    rows: list[dict[str, Any]] = []
    for result in results:
        for index, line in enumerate(result["lines"]):
            rows.append(
                {
                    "file": result["file"] if index == 0 else "",
                    "text": line["text"],
                    "number": line["number"],
                    "hex": line["hex"],
                }
            )
    return rows


def file_options(names: list[str]) -> list[dict[str, str]]:
    return [{"label": name, "value": name} for name in names]


def table_status(results: list[dict[str, Any]], visible: list[dict[str, Any]], term: str | None) -> str:
    if not results:
        return "No data available to display. Try refreshing."
    if not visible and term:
        return f'No results found for "{term}".'
    count = sum(len(r["lines"]) for r in visible)
    return f"Showing {count} line(s) from {len(visible)} file(s)."


def visible_rows(loaded: dict[str, Any] | None, term: str | None) -> tuple[list[dict[str, Any]], str]:
    """Rows and status line for the loaded dataset, whether it holds every file or one."""
    loaded = loaded or {}
    if loaded.get("error"):
        return [], ""
    results: list[dict[str, Any]] = loaded.get("results") or []
    visible = filter_results(results, term)
    return results_to_rows(visible), table_status(results, visible, term)
