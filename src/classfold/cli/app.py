from pathlib import Path
from typing import Annotated

import typer

from classfold.cli.common import CliState, configure_logging
from classfold.cli.config import config_app, toggle
from classfold.cli.scan import format_text, preview, scan, show
from classfold.cli.watch import watch

app = typer.Typer(
    name="classfold",
    help="Fold long class attribute values and preview them in a stable order.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    settings: Annotated[
        Path | None,
        typer.Option("--settings", envvar="CLASSFOLD_SETTINGS", help="Settings file to read and update."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    configure_logging(verbose)
    ctx.obj = CliState(settings_path=settings)


app.command("scan")(scan)
app.command("show")(show)
app.command("preview")(preview)
app.command("format")(format_text)
app.command("toggle")(toggle)
app.command("watch")(watch)
app.add_typer(config_app, name="config")


def main() -> None:
    app()
