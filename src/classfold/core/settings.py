"""Configuration keys and the typed snapshot the engine works from."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Strict, ValidationError

from classfold.core.ports.configuration import ConfigurationStore

logger = logging.getLogger(__name__)

NAMESPACE = "classfold"
WORD_WRAP_COLUMN_KEY = "editor.wordWrapColumn"

# columns kept free between a faded class list and the wrap column
WORD_WRAP_MARGIN = 10


class SettingKey(str, Enum):
    AUTO_FOLD = f"{NAMESPACE}.autoFold"
    UNFOLD_IF_LINE_SELECTED = f"{NAMESPACE}.unfoldIfLineSelected"
    SUPPORTED_LANGUAGES = f"{NAMESPACE}.supportedLanguages"
    FOLD_STYLE = f"{NAMESPACE}.foldStyle"
    FOLD_LENGTH_THRESHOLD = f"{NAMESPACE}.foldLengthThreshold"
    FOLD_MAX_LENGTH = f"{NAMESPACE}.foldMaxLength"


class FoldStyle(str, Enum):
    ALL = "ALL"
    QUOTED = "QUOTED"


class MatchGroupMode(str, Enum):
    ALL = "all"
    QUOTED_ONLY = "quoted_only"


# hand-edited values: no bools as counts, no strings or ints as flags
StrictFlag = Annotated[bool, Strict()]
StrictCount = Annotated[int, Strict()]


class FoldSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    auto_fold: StrictFlag = False
    unfold_if_line_selected: StrictFlag = False
    supported_languages: tuple[str, ...] = ()
    fold_style: FoldStyle = FoldStyle.ALL
    fold_length_threshold: StrictCount = 0
    fold_max_length: StrictCount = 0

    @property
    def match_group_mode(self) -> MatchGroupMode:
        return MatchGroupMode.QUOTED_ONLY if self.fold_style is FoldStyle.QUOTED else MatchGroupMode.ALL

    def supports(self, language_id: str) -> bool:
        return language_id in self.supported_languages


_FIELD_KEYS = {
    "auto_fold": SettingKey.AUTO_FOLD,
    "unfold_if_line_selected": SettingKey.UNFOLD_IF_LINE_SELECTED,
    "supported_languages": SettingKey.SUPPORTED_LANGUAGES,
    "fold_style": SettingKey.FOLD_STYLE,
    "fold_length_threshold": SettingKey.FOLD_LENGTH_THRESHOLD,
    "fold_max_length": SettingKey.FOLD_MAX_LENGTH,
}


def load_settings(store: ConfigurationStore) -> FoldSettings:
    """Build a snapshot from the store.

    Every value is validated on its own; a missing or malformed value falls
    back to its default without discarding the others.
    """
    values: dict[str, Any] = {}
    for field, key in _FIELD_KEYS.items():
        raw = store.get(key.value)
        if raw is None:
            continue
        if field == "supported_languages" and isinstance(raw, str):
            # a bare string is not a list of language ids
            logger.warning("Ignoring %s=%r: expected a list", key.value, raw)
            continue
        try:
            FoldSettings.model_validate({field: raw})
        except ValidationError:
            logger.warning("Ignoring %s=%r: falling back to default", key.value, raw)
            continue
        values[field] = raw
    return FoldSettings.model_validate(values)


def word_wrap_column(store: ConfigurationStore) -> int | None:
    raw = store.get(WORD_WRAP_COLUMN_KEY)
    if isinstance(raw, bool) or not isinstance(raw, int) or raw <= 0:
        return None
    return raw


def is_relevant_key(key: str) -> bool:
    return key == WORD_WRAP_COLUMN_KEY or key == NAMESPACE or key.startswith(f"{NAMESPACE}.")


def recommended_settings() -> dict[str, Any]:
    return {
        SettingKey.AUTO_FOLD.value: True,
        SettingKey.UNFOLD_IF_LINE_SELECTED.value: False,
        SettingKey.SUPPORTED_LANGUAGES.value: [
            "html",
            "javascript",
            "javascriptreact",
            "typescript",
            "typescriptreact",
            "vue",
            "svelte",
            "astro",
            "php",
        ],
        SettingKey.FOLD_STYLE.value: FoldStyle.ALL.value,
        SettingKey.FOLD_LENGTH_THRESHOLD.value: 0,
        SettingKey.FOLD_MAX_LENGTH.value: 0,
    }
