import bisect
from dataclasses import dataclass, field
from pathlib import Path

from classfold.core.languages import detect_language_from_path
from classfold.models import Position


@dataclass
class TextBuffer:
    """In-memory document with offset/position conversion.

    Lines end at ``\\n``; a preceding ``\\r`` belongs to the line it ends.
    """

    text: str
    language_id: str
    path: Path | None = None
    _line_starts: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, char in enumerate(self.text) if char == "\n")

    @classmethod
    def from_file(cls, path: str | Path, language_id: str | None = None) -> "TextBuffer":
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise FileNotFoundError(f"File not found: {path}") from None
        return cls(text=text, language_id=language_id or detect_language_from_path(file_path), path=file_path)

    def get_text(self) -> str:
        return self.text

    def line_at(self, line: int) -> str:
        start = self._line_starts[line]
        end = self._line_starts[line + 1] if line + 1 < len(self._line_starts) else len(self.text)
        return self.text[start:end].rstrip("\r\n")

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, len(self.text)))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return Position(line=line, character=offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        if position.line < 0:
            return 0
        if position.line >= len(self._line_starts):
            return len(self.text)
        start = self._line_starts[position.line]
        return start + min(max(position.character, 0), len(self.line_at(position.line)))
