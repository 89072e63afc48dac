"""Locate class-name attribute values in raw document text."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from classfold.core.ports.editor import TextDocument
from classfold.core.settings import MatchGroupMode
from classfold.models import MatchKind, Range, Span

CLASS_ATTRIBUTE_PATTERN = re.compile(
    r"(?:class|className)(?:=|:|:\s)"
    r"(?:"
    # {cn(...)} and other single-call expressions
    r"(?:\{\s*?.*?\()(?P<arguments>[\s\S]*?)(?:\)\s*?\})"
    r"|"
    # "...", '...', `...`, optionally wrapped in braces
    r"(?P<opening>\{?\s*?(?P<quote>['\"`]))(?P<content>[\s\S]*?)(?:(?P=opening)|(?P=quote)\s*?\})"
    r")"
)


@dataclass(frozen=True)
class CallArguments:
    text: str
    kind = MatchKind.CALL_ARGUMENTS


@dataclass(frozen=True)
class QuotedContent:
    text: str
    kind = MatchKind.QUOTED_CONTENT


Variant = CallArguments | QuotedContent


@dataclass(frozen=True)
class ClassAttributeMatch:
    offset: int
    text: str
    variant: Variant

    def fold_target(self, mode: MatchGroupMode) -> str | None:
        if mode is MatchGroupMode.ALL:
            return self.text
        return self.variant.text or None


def _variant_of(match: re.Match[str]) -> Variant:
    arguments = match.group("arguments")
    if arguments is not None:
        return CallArguments(arguments)
    return QuotedContent(match.group("content"))


def find_class_attributes(text: str) -> Iterator[ClassAttributeMatch]:
    for match in CLASS_ATTRIBUTE_PATTERN.finditer(text):
        yield ClassAttributeMatch(offset=match.start(), text=match.group(0), variant=_variant_of(match))


def scan(document: TextDocument, mode: MatchGroupMode = MatchGroupMode.ALL) -> Iterator[Span]:
    """Yield the fold targets of ``document`` in document order.

    In ``QUOTED_ONLY`` mode matches with an empty inner text are skipped.
    """
    for match in find_class_attributes(document.get_text()):
        target = match.fold_target(mode)
        if target is None:
            continue
        start = match.offset + match.text.find(target)
        end = start + len(target)
        yield Span(
            range=Range(start=document.position_at(start), end=document.position_at(end)),
            text=target,
            kind=match.variant.kind,
        )
