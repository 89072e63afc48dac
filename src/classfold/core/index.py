from collections.abc import Iterator

from classfold.models import Position, SpanKey


class SpanTextIndex:
    """Raw fold-target text of the folded and faded spans of one scan."""

    def __init__(self) -> None:
        self._texts: dict[SpanKey, str] = {}

    def record(self, key: SpanKey, text: str) -> None:
        self._texts[key] = text

    def lookup(self, position: Position) -> str | None:
        """Return the text of the first recorded span containing ``position``.

        Entries are checked in recording order; both ends are inclusive.
        """
        for key, text in self._texts.items():
            if position.line < key.start_line or position.line > key.end_line:
                continue
            if position.line == key.start_line and position.character < key.start_character:
                continue
            if position.line == key.end_line and position.character > key.end_character:
                continue
            return text
        return None

    def __contains__(self, key: object) -> bool:
        return key in self._texts

    def __iter__(self) -> Iterator[SpanKey]:
        return iter(self._texts)

    def __len__(self) -> int:
        return len(self._texts)
