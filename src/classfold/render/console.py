from rich.console import Console
from rich.text import Text

from classfold.editor.buffer import TextBuffer
from classfold.render.recording import RecordingRenderer

FOLD_PLACEHOLDER = "…"
FOLDED_STYLE = "bold cyan"
FADED_STYLE = "dim"


class ConsoleRenderer(RecordingRenderer):
    """Draws a document with its latest decorations applied.

    Folded spans collapse into a placeholder, faded spans are dimmed and
    unfolded spans are left as they are.
    """

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or Console()

    def render(self, document: TextBuffer) -> Text:
        text = document.get_text()
        marks = [(document.offset_at(r.start), document.offset_at(r.end), True) for r in self.folded]
        marks.extend((document.offset_at(r.start), document.offset_at(r.end), False) for r in self.faded)
        marks.sort()

        rendered = Text()
        cursor = 0
        for start, end, folded in marks:
            if start < cursor:
                continue
            rendered.append(text[cursor:start])
            if folded:
                rendered.append(FOLD_PLACEHOLDER, style=FOLDED_STYLE)
            else:
                rendered.append(text[start:end], style=FADED_STYLE)
            cursor = end
        rendered.append(text[cursor:])
        return rendered

    def print(self, document: TextBuffer) -> None:
        self.console.print(self.render(document), highlight=False, soft_wrap=True)
