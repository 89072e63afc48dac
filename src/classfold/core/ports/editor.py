from collections.abc import Sequence
from typing import Protocol

from classfold.models import Position, Selection


class TextDocument(Protocol):
    @property
    def language_id(self) -> str: ...

    def get_text(self) -> str: ...

    def position_at(self, offset: int) -> Position: ...


class TextEditor(Protocol):
    @property
    def document(self) -> TextDocument: ...

    @property
    def selections(self) -> Sequence[Selection]: ...
