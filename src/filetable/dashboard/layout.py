"""Dash layout: navbar with search, file filter and refresh, then the data table."""

from __future__ import annotations

from dash import dash_table, dcc, html

from filetable.dashboard.styles import (
    NAVBAR_STYLE,
    STRIPED_ROWS,
    TABLE_CELL_STYLE,
    TABLE_HEADER_STYLE,
)
from filetable.dashboard.table_data import COLUMNS


def _build_navbar() -> html.Div:
    return html.Div(
        [
            html.Strong("Filetable", style={"fontSize": "18px", "marginRight": "12px"}),
            dcc.Dropdown(
                id="file-filter-dropdown",
                placeholder="All files",
                clearable=True,
                style={"width": "280px"},
            ),
            dcc.Input(
                id="search-input",
                type="search",
                placeholder="Search...",
                debounce=True,
                style={"width": "260px", "padding": "6px"},
            ),
            html.Button("Refresh", id="refresh-btn", n_clicks=0),
        ],
        style=NAVBAR_STYLE,
    )


def build_layout() -> html.Div:
    """Return the top-level layout.

    ``loaded-data`` holds the last server response so the text search runs
    client-side without refetching. ``reload-token`` is bumped by Refresh.
    """
    return html.Div(
        [
            dcc.Store(id="page-load", data="ready"),
            dcc.Store(id="reload-token", data=0),
            dcc.Store(id="loaded-data", data={"file": None, "results": [], "error": None}),
            _build_navbar(),
            html.Div(id="error-alert"),
            dcc.Loading(
                [
                    html.Div(id="table-status", style={"marginBottom": "8px", "color": "#555", "fontSize": "13px"}),
                    dash_table.DataTable(  # type: ignore[attr-defined]
                        id="files-table",
                        columns=COLUMNS,
                        data=[],
                        page_size=50,
                        style_table={"overflowX": "auto"},
                        style_header=TABLE_HEADER_STYLE,
                        style_cell=TABLE_CELL_STYLE,
                        style_data_conditional=STRIPED_ROWS,
                    ),
                ]
            ),
        ],
        style={"padding": "20px", "fontFamily": "system-ui, sans-serif"},
    )
