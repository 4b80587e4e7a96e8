"""Dash application factory."""

from __future__ import annotations

from collections.abc import Callable

from dash import Dash

from filetable.core.ports.file_source import FileSource
from filetable.dashboard.callbacks import register_callbacks
from filetable.dashboard.layout import build_layout


def create_dashboard(source_factory: Callable[[], FileSource]) -> Dash:
    app = Dash(__name__, title="Filetable", suppress_callback_exceptions=True)
    app.layout = build_layout()
    register_callbacks(app, source_factory)
    return app
