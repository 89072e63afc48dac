"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from classfold.core.languages import resolve_language
from classfold.core.ports.renderer import DecorationRenderer
from classfold.core.session import FoldSession
from classfold.editor import InMemoryEditor, JsonFileConfigurationStore, TextBuffer
from classfold.models import Position, Selection

console = Console()
err_console = Console(stderr=True)

_MAX_TEXT_WIDTH = 60
_POSITION_RE = re.compile(r"^(\d+):(\d+)$")


@dataclass
class CliState:
    settings_path: Path | None = None

    def store(self) -> JsonFileConfigurationStore:
        return JsonFileConfigurationStore(self.settings_path)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def get_state(ctx: typer.Context) -> CliState:
    state = ctx.find_root().obj
    return state if isinstance(state, CliState) else CliState()


def fail(message: str) -> typer.Exit:
    err_console.print(f"[red]{message}[/red]")
    return typer.Exit(1)


def parse_position(value: str) -> Position:
    """Parse a 1-based ``LINE:COLUMN`` into a zero-based position."""
    match = _POSITION_RE.match(value.strip())
    if not match or int(match.group(1)) < 1 or int(match.group(2)) < 1:
        raise typer.BadParameter(f"expected LINE:COLUMN (1-based), got {value!r}")
    return Position(line=int(match.group(1)) - 1, character=int(match.group(2)) - 1)


def parse_selection(value: str) -> Selection:
    """Parse ``LINE:COL`` (a cursor) or ``LINE:COL-LINE:COL`` (a range)."""
    start_text, _, end_text = value.partition("-")
    start = parse_position(start_text)
    end = parse_position(end_text) if end_text else start
    if end < start:
        return Selection(start=end, end=start, reversed=True)
    return Selection(start=start, end=end)


def load_buffer(path: Path, language: str | None) -> TextBuffer:
    try:
        language_id = resolve_language(language, path)
    except ValueError as exc:
        raise fail(str(exc)) from None
    try:
        return TextBuffer.from_file(path, language_id)
    except FileNotFoundError as exc:
        raise fail(str(exc)) from None


def open_session(
    ctx: typer.Context,
    path: Path,
    language: str | None,
    renderer: DecorationRenderer,
    selections: list[Selection] | None = None,
) -> tuple[FoldSession, InMemoryEditor]:
    session = FoldSession(get_state(ctx).store(), renderer)
    session.load_config()
    editor = InMemoryEditor(load_buffer(path, language), list(selections or []))
    session.set_active_editor(editor)
    if session.last_result is None:
        raise fail(
            f"Language '{editor.document.language_id}' is not enabled; "
            "add it to classfold.supportedLanguages (see `classfold config init`)."
        )
    return session, editor


def truncate(value: str, max_width: int = _MAX_TEXT_WIDTH) -> str:
    value = " ".join(value.split())
    if len(value) > max_width:
        return value[: max_width - 3] + "..."
    return value


def format_position(position: Position) -> str:
    return f"{position.line + 1}:{position.character + 1}"
