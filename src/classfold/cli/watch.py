import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

from classfold.cli.common import console, fail, get_state
from classfold.core.ports.watcher import FileWatcherPort
from classfold.core.session import FoldSession
from classfold.editor import InMemoryEditor, TextBuffer
from classfold.render import RecordingRenderer
from classfold.watcher.watchfiles_adapter import WatchfilesWatcher

logger = logging.getLogger(__name__)


def watch(
    ctx: typer.Context,
    directory: Annotated[Path, typer.Argument(help="Directory to watch.")] = Path("."),
) -> None:
    """Rescan files as they change and summarize the result."""
    if not directory.is_dir():
        raise fail(f"Not a directory: {directory}")

    session = FoldSession(get_state(ctx).store(), RecordingRenderer())

    async def _on_change(paths: set[Path]) -> None:
        # settings may have been edited since the last change
        session.load_config()
        for path in sorted(paths):
            try:
                buffer = TextBuffer.from_file(path)
            except (FileNotFoundError, UnicodeDecodeError) as exc:
                logger.warning("Skipping %s: %s", path, exc)
                continue
            session.set_active_editor(InMemoryEditor(buffer))
            result = session.last_result
            if result is None:
                console.print(f"{path}: [dim]language '{buffer.language_id}' not enabled[/dim]")
                continue
            console.print(
                f"{path}: [cyan]{len(result.folded)} folded[/cyan], "
                f"[dim]{len(result.faded)} faded[/dim], "
                f"[green]{len(result.unfolded)} unfolded[/green]"
            )

    watcher: FileWatcherPort = WatchfilesWatcher(directory, _on_change)

    async def _run() -> None:
        await watcher.start()
        try:
            await watcher.wait()
        finally:
            await watcher.stop()

    console.print(f"[green]Watching[/green] {directory} (Ctrl+C to stop)")
    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("Stopped.")
