from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from classfold.editor.buffer import TextBuffer
from classfold.models import Selection


@dataclass
class InMemoryEditor:
    document: TextBuffer
    selections: list[Selection] = field(default_factory=list)

    def select(self, selections: Sequence[Selection]) -> None:
        self.selections = list(selections)

    def move_cursor(self, line: int, character: int) -> None:
        self.selections = [Selection.cursor(line, character)]


class InMemoryConfigurationStore:
    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values: dict[str, Any] = dict(values or {})
        self.writes: list[tuple[str, Any]] = []

    def get(self, key: str) -> Any:
        return self.values.get(key)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value
        self.writes.append((key, value))
