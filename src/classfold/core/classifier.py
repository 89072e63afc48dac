"""Decide how each matched class list is presented."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from classfold.core.index import SpanTextIndex
from classfold.core.settings import WORD_WRAP_MARGIN, FoldSettings
from classfold.models import Disposition, Range, Selection, Span


@dataclass
class Classification:
    unfolded: list[Span] = field(default_factory=list)
    faded: list[Span] = field(default_factory=list)
    folded: list[Span] = field(default_factory=list)
    index: SpanTextIndex = field(default_factory=SpanTextIndex)

    def bucket(self, disposition: Disposition) -> list[Span]:
        if disposition is Disposition.FOLDED:
            return self.folded
        if disposition is Disposition.FADED:
            return self.faded
        return self.unfolded

    def __len__(self) -> int:
        return len(self.unfolded) + len(self.faded) + len(self.folded)


def effective_max_length(settings: FoldSettings, word_wrap_column: int | None = None) -> int | None:
    """Longest fold target that is still folded rather than faded, if any."""
    if settings.fold_max_length > 0:
        return settings.fold_max_length
    if word_wrap_column is not None and word_wrap_column > WORD_WRAP_MARGIN:
        return word_wrap_column - WORD_WRAP_MARGIN
    return None


def is_range_selected(range_: Range, selections: Sequence[Selection]) -> bool:
    return any(selection.contains(range_) or range_.contains(selection) for selection in selections)


def is_line_of_range_selected(range_: Range, selections: Sequence[Selection]) -> bool:
    return any(selection.start.line == range_.start.line for selection in selections)


def decide(
    span: Span,
    settings: FoldSettings,
    selections: Sequence[Selection],
    max_length: int | None,
) -> Disposition:
    if not settings.auto_fold:
        return Disposition.UNFOLDED
    if is_range_selected(span.range, selections):
        return Disposition.UNFOLDED
    if settings.unfold_if_line_selected and is_line_of_range_selected(span.range, selections):
        return Disposition.UNFOLDED
    if len(span.text) < settings.fold_length_threshold:
        return Disposition.UNFOLDED
    if max_length is not None and len(span.text) > max_length:
        # an oversized placeholder would leave a mostly blank line behind
        return Disposition.FADED
    return Disposition.FOLDED


def classify(
    spans: Iterable[Span],
    settings: FoldSettings,
    selections: Sequence[Selection] = (),
    word_wrap_column: int | None = None,
) -> Classification:
    result = Classification()
    max_length = effective_max_length(settings, word_wrap_column)
    for span in spans:
        disposition = decide(span, settings, selections, max_length)
        result.bucket(disposition).append(span)
        if disposition is not Disposition.UNFOLDED:
            result.index.record(span.key, span.text)
    return result
