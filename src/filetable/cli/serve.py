import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.")
console = Console()


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from filetable.api.app import create_app

    app = create_app()
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)


@serve_app.command("dashboard")
def dashboard(
    host: str = "127.0.0.1",
    port: int = 8001,
) -> None:
    """Start the Dash table UI."""
    from filetable.client.http import HttpFileSource
    from filetable.config import get_settings
    from filetable.dashboard.app import create_dashboard

    settings = get_settings()
    app = create_dashboard(lambda: HttpFileSource(settings))
    console.print(f"[green]Starting dashboard on {host}:{port}[/green]")
    app.run(host=host, port=port)


@serve_app.callback(invoke_without_command=True)
def serve_all(
    ctx: typer.Context,
    host: str = "0.0.0.0",
    port: int = 8000,
) -> None:
    """Start the API and the dashboard together."""
    if ctx.invoked_subcommand is not None:
        return

    import threading

    import uvicorn

    from filetable.api.app import create_app
    from filetable.client.http import HttpFileSource
    from filetable.config import get_settings
    from filetable.dashboard.app import create_dashboard

    settings = get_settings()
    api_app = create_app(settings)
    dash_app = create_dashboard(lambda: HttpFileSource(settings))

    dashboard_port = port + 1

    threads = [
        threading.Thread(
            target=uvicorn.run,
            kwargs={"app": api_app, "host": host, "port": port},
            daemon=True,
        ),
        threading.Thread(
            target=dash_app.run,
            kwargs={"host": host, "port": dashboard_port},
            daemon=True,
        ),
    ]

    console.print(f"[green]Starting all servers on {host}[/green]")
    console.print(f"  API:       http://{host}:{port}")
    console.print(f"  Dashboard: http://{host}:{dashboard_port}")

    for t in threads:
        t.start()
    for t in threads:
        t.join()
