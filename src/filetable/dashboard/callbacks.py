"""Dash callback registrations."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from typing import Any

from dash import Dash, Input, Output, State, html

from filetable.core.aggregate import collect_files_data
from filetable.core.ports.file_source import FileSource
from filetable.dashboard.styles import ERROR_STYLE
from filetable.dashboard.table_data import file_options, visible_rows

_log = logging.getLogger(__name__)


def register_callbacks(app: Dash, source_factory: Callable[[], FileSource]) -> None:
    _loop = asyncio.new_event_loop()
    _source = source_factory()
    threading.Thread(target=_loop.run_forever, daemon=True, name="dash-async").start()

    def _run_async(coro: Any) -> Any:
        return asyncio.run_coroutine_threadsafe(coro, _loop).result(timeout=60)

    # ── File filter options ────────────────────────────────────────

    @app.callback(
        Output("file-filter-dropdown", "options"),
        [Input("page-load", "data"), Input("reload-token", "data")],
    )
    def load_file_options(_: Any, __: Any) -> list[dict[str, str]]:
        try:
            return file_options(_run_async(_source.list_files()))
        except Exception:
            _log.exception("load_file_options failed")
            return []

    # ── Refresh: clear the file filter and force a reload ─────────

    @app.callback(
        [Output("file-filter-dropdown", "value"), Output("reload-token", "data")],
        Input("refresh-btn", "n_clicks"),
        State("reload-token", "data"),
        prevent_initial_call=True,
    )
    def refresh(_: int, token: int | None) -> tuple[None, int]:
        return None, (token or 0) + 1

    # ── Server-side load (optionally restricted to one file) ──────

    @app.callback(
        [
            Output("loaded-data", "data"),
            Output("search-input", "value"),
            Output("error-alert", "children"),
        ],
        [Input("file-filter-dropdown", "value"), Input("reload-token", "data")],
    )
    def load_data(file_name: str | None, _: Any) -> tuple[dict[str, Any], str, Any]:
        try:
            results = _run_async(collect_files_data(_source, file_name or None))
        except Exception as exc:
            _log.exception("load_data failed")
            alert = html.Div(f"Error: {exc}", style=ERROR_STYLE)
            return {"file": file_name, "results": [], "error": str(exc)}, "", alert
        payload = [result.model_dump() for result in results]
        return {"file": file_name, "results": payload, "error": None}, "", None

    # ── Client-side search over the loaded dataset ────────────────

    @app.callback(
        [Output("files-table", "data"), Output("table-status", "children")],
        [Input("loaded-data", "data"), Input("search-input", "value")],
    )
    def render_table(loaded: dict[str, Any] | None, term: str | None) -> tuple[list[dict[str, Any]], str]:
        return visible_rows(loaded, term)
