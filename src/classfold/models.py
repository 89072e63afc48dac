from enum import Enum
from typing import NamedTuple, Union

from pydantic import BaseModel, ConfigDict, model_validator


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int
    character: int

    def __lt__(self, other: "Position") -> bool:
        return (self.line, self.character) < (other.line, other.character)

    def __le__(self, other: "Position") -> bool:
        return (self.line, self.character) <= (other.line, other.character)

    def __gt__(self, other: "Position") -> bool:
        return (self.line, self.character) > (other.line, other.character)

    def __ge__(self, other: "Position") -> bool:
        return (self.line, self.character) >= (other.line, other.character)


class Range(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @model_validator(mode="after")
    def _check_order(self) -> "Range":
        if self.end < self.start:
            raise ValueError("range end must not precede its start")
        return self

    @classmethod
    def from_coordinates(cls, start_line: int, start_character: int, end_line: int, end_character: int) -> "Range":
        return cls(
            start=Position(line=start_line, character=start_character),
            end=Position(line=end_line, character=end_character),
        )

    def contains(self, other: Union["Range", Position]) -> bool:
        """Inclusive containment of a position or of a whole range."""
        if isinstance(other, Position):
            return self.start <= other <= self.end
        return self.start <= other.start and other.end <= self.end


class Selection(Range):
    """A selection; ``reversed`` is True when the cursor sits at ``start``."""

    reversed: bool = False

    @classmethod
    def cursor(cls, line: int, character: int) -> "Selection":
        position = Position(line=line, character=character)
        return cls(start=position, end=position)


class SpanKey(NamedTuple):
    start_line: int
    start_character: int
    end_line: int
    end_character: int

    @classmethod
    def of(cls, range_: Range) -> "SpanKey":
        return cls(range_.start.line, range_.start.character, range_.end.line, range_.end.character)


class MatchKind(str, Enum):
    CALL_ARGUMENTS = "call_arguments"
    QUOTED_CONTENT = "quoted_content"


class Span(BaseModel):
    model_config = ConfigDict(frozen=True)

    range: Range
    text: str
    kind: MatchKind

    @property
    def key(self) -> SpanKey:
        return SpanKey.of(self.range)


class Disposition(str, Enum):
    UNFOLDED = "unfolded"
    FADED = "faded"
    FOLDED = "folded"
