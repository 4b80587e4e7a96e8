import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from filetable.cli.files import files_app
from filetable.cli.parse import parse
from filetable.cli.serve import serve_app

app = typer.Typer(
    name="filetable",
    help="Filetable CLI: fetch, validate, and serve CSV records.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    log_level: Annotated[str, typer.Option(help="Logging level (DEBUG, INFO, WARNING, ...).")] = "WARNING",
) -> None:
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


app.add_typer(files_app, name="files")
app.command("parse")(parse)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
