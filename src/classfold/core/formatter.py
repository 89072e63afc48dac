"""Reorder a class list into one line per property group for previews.

Base classes are grouped roughly the way CSS style guides order
properties: position first, then layout, box model, type, paint, motion
and interaction. Variant classes (``hover:``, ``md:``, ``dark:`` ...) follow,
one line per prefix in the order the prefixes first appear.
"""

from __future__ import annotations

import re
from enum import Enum

_EDGE_CHARACTERS = re.compile(r"^['\"`{}\s]+|['\"`{}\s]+$")


class Category(str, Enum):
    POSITIONING = "positioning"
    DISPLAY = "display"
    FLEX_GRID = "flex_grid"
    BOX_MODEL = "box_model"
    TYPOGRAPHY = "typography"
    VISUAL = "visual"
    TRANSFORMS = "transforms"
    TRANSITIONS = "transitions"
    INTERACTIVITY = "interactivity"
    OTHERS = "others"


# Tested top to bottom; display precedes flex/grid so "flex-col" stays with "flex".
CATEGORY_PATTERNS: tuple[tuple[Category, re.Pattern[str]], ...] = (
    (Category.POSITIONING, re.compile(r"^(static|relative|absolute|fixed|sticky|top-|right-|bottom-|left-|z-|inset-)")),
    (Category.DISPLAY, re.compile(r"^(block|inline|flex|grid|hidden|table|flow-)")),
    (Category.FLEX_GRID, re.compile(r"^(flex-|grid-|justify-|items-|content-|self-|place-|gap-|space-|order-)")),
    (Category.BOX_MODEL, re.compile(r"^(container|box-|w-|h-|min-|max-|p[xytblr]?-|m[xytblr]?-|overflow-|aspect-)")),
    (
        Category.TYPOGRAPHY,
        re.compile(
            r"^(font-|text-|leading-|tracking-|align-|whitespace-|break-|hyphens-|line-clamp|truncate|italic"
            r"|underline|uppercase|lowercase|capitalize|normal-case|decoration-)"
        ),
    ),
    (Category.VISUAL, re.compile(r"^(bg-|from-|via-|to-|gradient-|border|rounded|shadow|opacity-|mix-|backdrop-)")),
    (Category.TRANSFORMS, re.compile(r"^(scale-|rotate-|translate-|skew-|transform|origin-)")),
    (Category.TRANSITIONS, re.compile(r"^(transition|duration-|ease-|delay-|animate-)")),
    (Category.INTERACTIVITY, re.compile(r"^(cursor-|select-|resize-|appearance-|pointer-events-|touch-)")),
)


def tokenize(class_text: str) -> list[str]:
    cleaned = _EDGE_CHARACTERS.sub("", class_text.strip())
    return [token for token in cleaned.split() if token]


def classify_token(token: str) -> Category:
    for category, pattern in CATEGORY_PATTERNS:
        if pattern.match(token):
            return category
    return Category.OTHERS


def variant_prefix(token: str) -> str:
    return token.split(":", 1)[0] + ":"


def format_class_names(class_text: str) -> str:
    classes = tokenize(class_text)

    base_classes: dict[Category, list[str]] = {category: [] for category in Category}
    prefixed_classes: dict[str, list[str]] = {}

    for cls in classes:
        if ":" in cls:
            prefixed_classes.setdefault(variant_prefix(cls), []).append(cls)
        else:
            base_classes[classify_token(cls)].append(cls)

    lines = [" ".join(group) + "\n" for group in base_classes.values() if group]
    lines.extend(" ".join(group) + "\n" for group in prefixed_classes.values() if group)

    return "".join(lines) or " ".join(classes)


def render_preview_markdown(class_text: str) -> str:
    """Wrap the formatted class list in a fenced css block."""
    return f"```css\n{format_class_names(class_text)}```"
