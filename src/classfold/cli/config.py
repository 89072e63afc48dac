"""Settings file commands."""

from __future__ import annotations

import json
from typing import Annotated, Any

import typer
from rich.table import Table

from classfold.cli.common import console, fail, get_state
from classfold.core.session import FoldSession
from classfold.core.settings import NAMESPACE, SettingKey, load_settings, recommended_settings
from classfold.render import RecordingRenderer

config_app = typer.Typer(help="Inspect and edit the settings file.")


def _qualify(key: str) -> str:
    return key if "." in key else f"{NAMESPACE}.{key}"


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@config_app.command("show")
def show(ctx: typer.Context) -> None:
    """Show the effective settings."""
    store = get_state(ctx).store()
    settings = load_settings(store)
    console.print(f"Settings file: {store.path}")
    table = Table(show_lines=False)
    table.add_column("key")
    table.add_column("value")
    for key, value in settings.model_dump(mode="json").items():
        table.add_row(key, json.dumps(value))
    console.print(table)


@config_app.command("init")
def init(
    ctx: typer.Context,
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing settings file.")] = False,
) -> None:
    """Write a settings file with recommended values."""
    store = get_state(ctx).store()
    if store.path.exists() and not force:
        raise fail(f"{store.path} already exists; use --force to overwrite.")
    store.write_all(recommended_settings())
    console.print(f"[green]Wrote[/green] {store.path}")


@config_app.command("set")
def set_value(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Setting key, e.g. foldMaxLength or classfold.foldStyle.")],
    value: Annotated[str, typer.Argument(help="JSON value; bare words are stored as strings.")],
) -> None:
    """Set a single setting."""
    qualified = _qualify(key)
    known = {item.value for item in SettingKey}
    if qualified not in known and qualified != "editor.wordWrapColumn":
        raise fail(f"Unknown setting '{key}'. Known: {sorted(known | {'editor.wordWrapColumn'})}")
    store = get_state(ctx).store()
    store.set(qualified, _parse_value(value))
    console.print(f"[green]Set[/green] {qualified} = {json.dumps(_parse_value(value))}")


def toggle(ctx: typer.Context) -> None:
    """Turn automatic folding on or off."""
    session = FoldSession(get_state(ctx).store(), RecordingRenderer())
    session.load_config()
    enabled = session.toggle_auto_fold()
    state = "[green]enabled[/green]" if enabled else "[yellow]disabled[/yellow]"
    console.print(f"Auto fold {state}")
