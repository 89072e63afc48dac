from pathlib import Path
from typing import Annotated

import typer
from rich.markdown import Markdown
from rich.table import Table
from rich.text import Text

from classfold.cli.common import (
    console,
    fail,
    format_position,
    open_session,
    parse_position,
    parse_selection,
    truncate,
)
from classfold.core.formatter import format_class_names, render_preview_markdown
from classfold.models import Disposition
from classfold.render import ConsoleRenderer, RecordingRenderer

_DISPOSITION_STYLES = {
    Disposition.FOLDED: "cyan",
    Disposition.FADED: "dim",
    Disposition.UNFOLDED: "green",
}

PathArgument = Annotated[Path, typer.Argument(help="File to scan.")]
LanguageOption = Annotated[
    str | None, typer.Option(help="Language id or alias; detected from the file extension when omitted.")
]
SelectOption = Annotated[
    list[str] | None,
    typer.Option("--select", "-s", help="Cursor LINE:COL or selection LINE:COL-LINE:COL (1-based); repeatable."),
]


def scan(
    ctx: typer.Context,
    path: PathArgument,
    language: LanguageOption = None,
    select: SelectOption = None,
) -> None:
    """List class attribute values and how each one is displayed."""
    selections = [parse_selection(value) for value in select or []]
    session, _ = open_session(ctx, path, language, RecordingRenderer(), selections)
    result = session.last_result
    assert result is not None

    rows = []
    for disposition in Disposition:
        rows.extend((span, disposition) for span in result.bucket(disposition))
    rows.sort(key=lambda row: (row[0].range.start.line, row[0].range.start.character))

    table = Table(show_lines=False)
    for header in ("disposition", "start", "end", "length", "text"):
        table.add_column(header)
    for span, disposition in rows:
        table.add_row(
            f"[{_DISPOSITION_STYLES[disposition]}]{disposition.value}[/]",
            format_position(span.range.start),
            format_position(span.range.end),
            str(len(span.text)),
            Text(truncate(span.text)),
        )
    console.print(table)
    console.print(f"({len(rows)} spans)")


def show(
    ctx: typer.Context,
    path: PathArgument,
    language: LanguageOption = None,
    select: SelectOption = None,
) -> None:
    """Print the file with folded class lists collapsed and long ones faded."""
    selections = [parse_selection(value) for value in select or []]
    renderer = ConsoleRenderer(console)
    _, editor = open_session(ctx, path, language, renderer, selections)
    renderer.print(editor.document)


def preview(
    ctx: typer.Context,
    path: PathArgument,
    position: Annotated[str, typer.Argument(help="LINE:COL (1-based) inside a folded or faded class list.")],
    language: LanguageOption = None,
) -> None:
    """Show the reordered class list under a position."""
    target = parse_position(position)
    session, _ = open_session(ctx, path, language, RecordingRenderer())
    class_text = session.hover_text(target)
    if not class_text:
        raise fail(f"No folded class list at {position}.")
    console.print(Markdown(render_preview_markdown(class_text), code_theme="ansi_dark"))


def format_text(
    text: Annotated[str, typer.Argument(help="Class list, quotes and braces allowed.")],
) -> None:
    """Reorder a class list the way previews show it."""
    console.print(format_class_names(text), end="", highlight=False, markup=False)
