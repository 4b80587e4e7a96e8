"""Inline styles shared by the dashboard layout."""

from __future__ import annotations

from typing import Any

NAVBAR_STYLE: dict[str, Any] = {
    "display": "flex",
    "alignItems": "center",
    "gap": "12px",
    "marginBottom": "16px",
    "padding": "8px 12px",
    "border": "1px solid #ddd",
    "borderRadius": "8px",
    "backgroundColor": "#f9f9f9",
    "flexWrap": "wrap",
}

ERROR_STYLE: dict[str, Any] = {
    "color": "#721c24",
    "backgroundColor": "#f8d7da",
    "border": "1px solid #f5c6cb",
    "borderRadius": "6px",
    "padding": "8px 12px",
    "marginBottom": "12px",
}

TABLE_HEADER_STYLE: dict[str, Any] = {
    "backgroundColor": "#212529",
    "color": "#fff",
    "fontWeight": "bold",
}

TABLE_CELL_STYLE: dict[str, Any] = {
    "textAlign": "left",
    "padding": "4px 8px",
    "fontSize": "13px",
    "fontFamily": "monospace",
}

STRIPED_ROWS: list[dict[str, Any]] = [
    {"if": {"row_index": "odd"}, "backgroundColor": "#f2f2f2"},
]
